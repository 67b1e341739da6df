"""
Unit tests for roster name parsing and validation.
"""
import unittest

from linechange.services.player_service import (
    PlayerService, PlayerValidationError, parse_player_names
)


class TestParsePlayerNames(unittest.TestCase):
    """Test cases for the free-form name parser."""

    def test_trims_and_drops_empty_entries(self) -> None:
        self.assertEqual(parse_player_names(" Ann, Ben,, Cal ,"), ["Ann", "Ben", "Cal"])

    def test_preserves_order_and_duplicates(self) -> None:
        self.assertEqual(parse_player_names("Zed,Amy,Zed"), ["Zed", "Amy", "Zed"])

    def test_empty_input(self) -> None:
        self.assertEqual(parse_player_names(""), [])
        self.assertEqual(parse_player_names(None), [])
        self.assertEqual(parse_player_names(" , ,"), [])

    def test_custom_separator(self) -> None:
        self.assertEqual(parse_player_names("Ann; Ben", separator=";"), ["Ann", "Ben"])


class TestPlayerService(unittest.TestCase):
    """Test cases for PlayerService validation."""

    def setUp(self) -> None:
        self.player_service = PlayerService(max_name_length=10)

    def test_names_from_string(self) -> None:
        self.assertEqual(self.player_service.names_from_input("Ann, Ben"), ["Ann", "Ben"])

    def test_names_from_list(self) -> None:
        self.assertEqual(
            self.player_service.names_from_input([" Ann ", "", "Ben"]), ["Ann", "Ben"]
        )

    def test_empty_input_raises(self) -> None:
        for raw in ("", "  ,  ", None, []):
            with self.assertRaises(PlayerValidationError):
                self.player_service.names_from_input(raw)

    def test_long_name_raises(self) -> None:
        with self.assertRaises(PlayerValidationError) as ctx:
            self.player_service.names_from_input("Ann, Bartholomew the Great")
        self.assertIn("exceeds 10 characters", str(ctx.exception))

    def test_validate_player_names_returns_errors(self) -> None:
        self.assertEqual(self.player_service.validate_player_names(["Ann"]), [])
        self.assertEqual(len(self.player_service.validate_player_names([])), 1)


if __name__ == "__main__":
    unittest.main()
