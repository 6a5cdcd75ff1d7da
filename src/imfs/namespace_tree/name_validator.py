"""Naming rules for entries inserted into the namespace."""

from typing import Optional, Sequence

from imfs.exceptions import InvalidCharacterError, NameTooLongError, NameTooShortError

MAX_NAME_LENGTH = 256

INVALID_CHARACTERS = (
    " ",
    "/",
    "\\",
    "#",
    "@",
    "<",
    ">",
    "{",
    "}",
    "$",
    "?",
    "+",
    "`",
    "|",
    "=",
    "%",
    "*",
    ":",
)


class NameValidator:
    """Validates names proposed for new files and directories.

    Checks run in a fixed order and the first violation wins: the name must not be
    empty, must not contain any of the configured invalid characters, and must not
    be longer than the configured maximum length.

    The character rule is also exposed on its own through ``find_invalid_character``
    so that path segments can be checked without the length and emptiness rules.

    Attributes:
        max_name_length (int): Longest accepted name, in characters.
        invalid_characters (Sequence[str]): Characters a name may not contain, in the
            order they are reported.

    Example:
        >>> validator = NameValidator()
        >>> validator.validate("notes.txt")
        >>> validator.validate("a*b")
        Traceback (most recent call last):
        ...
        imfs.exceptions.InvalidCharacterError: Proposed name contains invalid character: *.
        >>> validator.find_invalid_character("a:b")
        ':'
    """

    def __init__(
        self,
        max_name_length: int = MAX_NAME_LENGTH,
        invalid_characters: Sequence[str] = INVALID_CHARACTERS,
    ) -> None:
        if max_name_length < 1:
            raise ValueError(f"max_name_length must be at least 1, got {max_name_length}")
        self.max_name_length = max_name_length
        self.invalid_characters = tuple(invalid_characters)

    def find_invalid_character(self, text: str) -> Optional[str]:
        """Return the first invalid character contained in ``text``, or None.

        Characters are tried in the configured order, not in the order they appear
        in ``text``.
        """
        for character in self.invalid_characters:
            if character in text:
                return character
        return None

    def validate(self, name: str) -> None:
        """Check that ``name`` may be used for a new entry.

        Args:
            name: The proposed file or directory name.

        Raises:
            NameTooShortError: If the name is empty.
            InvalidCharacterError: If the name contains an invalid character.
            NameTooLongError: If the name is longer than ``max_name_length``.
        """
        if name == "":
            raise NameTooShortError(name)
        character = self.find_invalid_character(name)
        if character is not None:
            raise InvalidCharacterError(name, character)
        if len(name) > self.max_name_length:
            raise NameTooLongError(name, self.max_name_length)
