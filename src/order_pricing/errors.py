"""Exception hierarchy for the pricing tool."""


class PricingToolError(Exception):
    """Base exception for all pricing tool errors."""


# --- Configuration ---
class ConfigError(PricingToolError):
    """Invalid discount configuration."""


# --- Pricing ---
class ValidationError(PricingToolError, ValueError):
    """Order input failed validation."""

    def __init__(self, message: str, errors: list = None):
        super().__init__(message)
        self.errors = errors or []


# --- Calculator ---
class CalculatorError(PricingToolError):
    """Arithmetic dispatch error."""


class UnknownOperationError(CalculatorError, LookupError):
    """No operation is registered under the requested name."""

    def __init__(self, operation):
        super().__init__(f"Unknown operation: {operation}")
        self.operation = operation


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """DIVIDE was requested with a zero divisor."""

    def __init__(self):
        super().__init__("Division by zero is not allowed")
