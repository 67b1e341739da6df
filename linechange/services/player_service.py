"""
Player service for the Line Change Timer application.

This module turns free-form roster input into a clean list of player names.
The timing core is only ever handed a non-empty list; an empty or invalid
input is reported here as a PlayerValidationError.
"""
from typing import Iterable, List, Optional, Union

from ..utils import MAX_NAME_LENGTH, NAME_SEPARATOR, get_logger

log = get_logger(__name__)


class PlayerValidationError(Exception):
    """Custom exception for roster input validation errors."""
    pass


def parse_player_names(text: Optional[str], separator: str = NAME_SEPARATOR) -> List[str]:
    """
    Split roster input into trimmed, non-empty names in input order.

    Args:
        text: Raw input such as ``"Ann, Ben,, Cal "``
        separator: Name separator

    Returns:
        List of names, e.g. ``["Ann", "Ben", "Cal"]``
    """
    if not text:
        return []
    return [name.strip() for name in text.split(separator) if name.strip()]


class PlayerService:
    """
    Service class for validating roster input.

    Duplicate names are allowed; players are identified by id, not by name.
    """

    def __init__(self, max_name_length: int = MAX_NAME_LENGTH, separator: str = NAME_SEPARATOR):
        """
        Initialize PlayerService.

        Args:
            max_name_length: Longest accepted display name
            separator: Separator used when parsing free-form input
        """
        self.max_name_length = max_name_length
        self.separator = separator

    def validate_player_names(self, names: List[str]) -> List[str]:
        """
        Validate a parsed name list and return validation error messages.

        Args:
            names: Parsed names

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not names:
            errors.append("Please enter at least one valid player name")

        for name in names:
            if len(name) > self.max_name_length:
                errors.append(
                    f"Player name '{name[:20]}...' exceeds {self.max_name_length} characters"
                )

        return errors

    def names_from_input(self, raw: Union[str, Iterable[str], None]) -> List[str]:
        """
        Parse and validate roster input.

        Args:
            raw: Separator-delimited string, or an iterable of names

        Returns:
            Validated list of names

        Raises:
            PlayerValidationError: If no valid name remains or a name is too long
        """
        if raw is None or isinstance(raw, str):
            names = parse_player_names(raw, self.separator)
        else:
            names = [str(name).strip() for name in raw if str(name).strip()]

        errors = self.validate_player_names(names)
        if errors:
            log.debug("Rejected roster input: %s", errors)
            raise PlayerValidationError(f"Player validation failed: {'; '.join(errors)}")

        return names
