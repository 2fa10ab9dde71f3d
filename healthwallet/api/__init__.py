from healthwallet.api.routes import router

__all__ = ["router"]
