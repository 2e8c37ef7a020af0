from ..services.user_service import UserService

# Process-wide store, created once at import
user_service = UserService()

def get_user_service() -> UserService:
    return user_service
