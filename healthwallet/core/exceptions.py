"""Domain errors raised by services and translated to HTTP responses by routes."""


class HealthWalletError(Exception):
    """Base class for service-level errors."""


class EmailAlreadyRegisteredError(HealthWalletError):
    def __init__(self, email: str):
        super().__init__("User with this email already exists")
        self.email = email


class ReportValidationError(HealthWalletError):
    """Upload metadata was missing or malformed."""


class AlreadySharedError(HealthWalletError):
    def __init__(self, report_id: int, email: str):
        super().__init__("Report already shared with this user")
        self.report_id = report_id
        self.email = email
