from .authenticate import AuthenticateQuery, AuthenticateHandler

__all__ = ["AuthenticateQuery", "AuthenticateHandler"]
