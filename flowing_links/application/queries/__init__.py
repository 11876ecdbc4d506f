"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- auth/     → authenticate
- users/    → list_users, get_user, username_exists
- projects/ → list_projects, get_project
- labels/   → list_labels, get_label
- links/    → list_links, get_link, search_links, link_exists
"""
