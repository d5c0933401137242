"""
Shop Errors

Message constants and the domain exceptions raised by services and
repositories. api/index.py maps every ShopError to its status_code.
"""

# User errors
ERROR_USER_NOT_FOUND = "User not found"
ERROR_USER_EMAIL_DUPLICATED = "Email is already registered"
ERROR_LOGIN_FAILED = "Email or password is incorrect"
ERROR_UNAUTHORIZED = "Unauthorized"
ERROR_FORBIDDEN = "Access denied"
ERROR_INVALID_TOKEN = "Invalid token"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCT_NAME_DUPLICATED = "Product name is already in use"
ERROR_OPTION_NOT_FOUND = "Option not found for product"
ERROR_INVALID_OPTION_TREE = "Invalid option tree"

# Generic errors
ERROR_INVALID_REQUEST = "Invalid request"


class ShopError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 400
    message = ERROR_INVALID_REQUEST

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class ProductNotFoundError(ShopError):
    status_code = 404
    message = ERROR_PRODUCT_NOT_FOUND

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"id={product_id}")


class ProductNameDuplicationError(ShopError):
    message = ERROR_PRODUCT_NAME_DUPLICATED

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)


class OptionNotFoundError(ShopError):
    message = ERROR_OPTION_NOT_FOUND

    def __init__(self, option_id: int):
        self.option_id = option_id
        super().__init__(f"id={option_id}")


class InvalidOptionTreeError(ShopError):
    """Options reference a missing parent, repeat an id or form a cycle."""

    message = ERROR_INVALID_OPTION_TREE


class UserNotFoundError(ShopError):
    status_code = 404
    message = ERROR_USER_NOT_FOUND

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"id={user_id}")


class UserEmailDuplicationError(ShopError):
    message = ERROR_USER_EMAIL_DUPLICATED

    def __init__(self, email: str):
        self.email = email
        super().__init__(email)


class LoginFailError(ShopError):
    message = ERROR_LOGIN_FAILED

    def __init__(self, email: str):
        self.email = email
        # Never echo which half of the credentials was wrong
        super().__init__()


class InvalidTokenError(ShopError):
    status_code = 401
    message = ERROR_INVALID_TOKEN

    def __init__(self, token: str | None = None):
        self.token = token
        super().__init__()
