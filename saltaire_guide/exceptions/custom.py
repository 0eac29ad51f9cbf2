class CategoryNotFoundError(Exception):
    def __init__(self, slug: str):
        self.slug = slug
        self.message = f"Unknown directory category: {slug}"
        super().__init__(self.message)


class DirectoryConfigError(Exception):
    def __init__(self, message: str, category: str | None = None):
        self.message = message
        self.category = category
        super().__init__(f"{category}: {message}" if category else message)


class SignupStorageError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ListingWebhookError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
