"""Errors raised at the engine's file and configuration boundary.

Schedule calculation and inventory parsing never raise: bad input produces
validation warnings or an empty result. Only loading a rule table or reading
an input file can fail, and those failures carry a stable error_code plus a
context dict so the CLI can report them as text or JSON.
"""

from pathlib import Path
from typing import Any


class TaxInventoryError(Exception):
    error_code: str = "TAX_INVENTORY_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error_code, "message": self.message, "context": self.context}


class TaxRulesError(TaxInventoryError):
    """A tax-year rule table could not be loaded."""

    error_code = "TAX_RULES_ERROR"


class TaxRulesFileNotFoundError(TaxRulesError):
    error_code = "TAX_RULES_FILE_NOT_FOUND"

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Tax rules file not found: {path}", context={"path": str(path)})


class InvalidTaxRulesError(TaxRulesError):
    """The rule file exists but is not valid JSON or has malformed entries."""

    error_code = "INVALID_TAX_RULES"

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(
            f"Invalid tax rules in {path}: {reason}",
            context={"path": str(path), "reason": reason},
        )


class InventoryImportError(TaxInventoryError):
    """An inventory source could not be read."""

    error_code = "INVENTORY_IMPORT_ERROR"


class InputFileNotFoundError(InventoryImportError):
    error_code = "INPUT_FILE_NOT_FOUND"

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Input file not found: {path}", context={"path": str(path)})
