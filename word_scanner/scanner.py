from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from .errors import PastBounds, WordDoesNotExist

# Single characters that separate words; each one is also a word of its own
WORD_DELIMITERS = frozenset({" ", ",", ".", "{", "}", "[", "]", "?", "!"})


def is_delimiter(char: str | None, delimiters: Iterable[str] = WORD_DELIMITERS) -> bool:
    """True if char is exactly one of the delimiter characters"""
    # "in" on a str alphabet is a substring test
    return char is not None and len(char) == 1 and char in delimiters


@dataclass
class Scanner:
    """Read position over an immutable string with word-wise navigation

    The position always points at an existing character: 0 is the start of
    the string and len(text) - 1 is the end. Assigning anything else to
    `position` raises PastBounds. Characters are Python str elements (code
    points), so a grapheme made of several code points counts as several
    characters.

    `delimiters` accepts any iterable of single characters (a str works) and
    is stored as a frozenset.

    Queries that need to look around (current_word, next_word, ...) work on a
    copy and never move this scanner. Copies share the text, only the
    position is duplicated.
    """

    text: str
    position: int = 0
    delimiters: Iterable[str] = field(default=WORD_DELIMITERS, repr=False)

    def __setattr__(self, name, value):
        # Empty text is rejected by __post_init__ with a ValueError instead
        if name == "position" and self.__dict__.get("text"):
            if not 0 <= value < len(self.text):
                raise PastBounds(
                    f"Position {value} is outside of 0..{len(self.text) - 1}."
                )
        super().__setattr__(name, value)

    def __post_init__(self):
        if not self.text:
            raise ValueError("Scanner needs non-empty text")
        if not isinstance(self.delimiters, frozenset):
            self.delimiters = frozenset(self.delimiters)
        for char in self.delimiters:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Delimiter must be a single character: {char!r}")

    def copy(self) -> "Scanner":
        """Independent scanner at the same position, sharing the text"""
        return Scanner(self.text, self.position, self.delimiters)

    # Basic movement

    def advance(self) -> None:
        self.advance_by(1)

    def advance_by(self, x: int) -> None:
        """Step forward x times; steps taken before a failing one are kept"""
        for _ in range(x):
            if self.at_end_of_string:
                raise PastBounds()
            self.position += 1

    def precede(self) -> None:
        self.precede_by(1)

    def precede_by(self, x: int) -> None:
        """Step backward x times; steps taken before a failing one are kept"""
        for _ in range(x):
            if self.at_start_of_string:
                raise PastBounds()
            self.position -= 1

    def advance_until(self, stopper: Callable[["Scanner"], bool]) -> None:
        """Step forward until stopper(scanner) is true, PastBounds at the end"""
        while not stopper(self):
            self.advance()

    def precede_until(self, stopper: Callable[["Scanner"], bool]) -> None:
        """Step backward until stopper(scanner) is true, PastBounds at the start"""
        while not stopper(self):
            self.precede()

    # Jumps

    def jump_to_start_of_string(self) -> None:
        self.position = 0

    def jump_to_end_of_string(self) -> None:
        self.position = len(self.text) - 1

    def jump_to_start_of_word(self) -> None:
        self.precede_until(lambda scanner: scanner.at_start_of_word)

    def jump_to_end_of_word(self) -> None:
        self.advance_until(lambda scanner: scanner.at_end_of_word)

    def jump_to_start_of_previous_word(self) -> None:
        """Move onto the last character of the word before the current one

        A delimiter under the cursor is the current word, so delimiters are
        skipped only after stepping off the current word. Raises
        WordDoesNotExist when only delimiters (or nothing) come before it.
        """
        if not self.at_delimiter:
            self.jump_to_start_of_word()

        if self.at_start_of_string:
            raise WordDoesNotExist()

        self.precede()
        try:
            self.precede_until(lambda scanner: not scanner.at_delimiter)
        except PastBounds as e:
            raise WordDoesNotExist() from e

    def jump_to_start_of_next_word(self) -> None:
        """Move onto the first character of the word after the current one

        Mirror of jump_to_start_of_previous_word. Raises WordDoesNotExist when
        only delimiters (or nothing) follow the current word.
        """
        if not self.at_delimiter:
            self.jump_to_end_of_word()

        if self.at_end_of_string:
            raise WordDoesNotExist()

        self.advance()
        try:
            self.advance_until(lambda scanner: not scanner.at_delimiter)
        except PastBounds as e:
            raise WordDoesNotExist() from e

    # Information

    @property
    def current_character(self) -> str:
        return self.text[self.position]

    @property
    def previous_character(self) -> str | None:
        if self.at_start_of_string:
            return None
        return self.text[self.position - 1]

    @property
    def next_character(self) -> str | None:
        if self.at_end_of_string:
            return None
        return self.text[self.position + 1]

    def current_word(self) -> str:
        """Word under the cursor; a delimiter is returned as a one-character word"""
        if self.at_delimiter:
            return self.current_character

        scanner = self.copy()
        scanner.jump_to_start_of_word()
        start = scanner.position
        scanner.jump_to_end_of_word()

        return self.text[start : scanner.position + 1]

    def next_word(self) -> str:
        """Word after the current one, WordDoesNotExist if there is none"""
        scanner = self.copy()
        scanner.jump_to_start_of_next_word()
        return scanner.current_word()

    def previous_word(self) -> str:
        """Word before the current one, WordDoesNotExist if there is none"""
        scanner = self.copy()
        scanner.jump_to_start_of_previous_word()
        return scanner.current_word()

    def relative_range(self, from_: int, to: int) -> str:
        """
        Characters read forward from an anchor `from_` places behind the cursor.

        Returns the `from_ + to` characters following the anchor, without the
        anchor itself. Strict: raises PastBounds if the anchor falls outside
        the text or the span runs past its end.

        Examples:
            >>> Scanner("Hello, world!").relative_range(0, 4)
            'ello'
            >>> Scanner("Hello, world!", 4).relative_range(2, 1)
            'lo,'
        """
        anchor = self.position - from_
        if not 0 <= anchor < len(self.text):
            raise PastBounds()

        count = from_ + to
        if count <= 0:
            return ""
        if count > len(self.text) - 1 - anchor:
            raise PastBounds()

        return self.text[anchor + 1 : anchor + 1 + count]

    def next_x_characters(self, x: int) -> str:
        """Up to x characters after the cursor, cut short at the end of the string"""
        if x <= 0:
            return ""
        return self.text[self.position + 1 : self.position + 1 + x]

    @property
    def characters_left(self) -> int:
        return len(self.text) - 1 - self.position

    def words(self) -> Iterator[str]:
        """Iterate every word of the text in order, delimiters included"""
        scanner = self.copy()
        scanner.jump_to_start_of_string()

        while True:
            yield scanner.current_word()
            if not scanner.at_delimiter:
                scanner.jump_to_end_of_word()
            if scanner.at_end_of_string:
                return
            scanner.advance()

    # Location

    @property
    def at_delimiter(self) -> bool:
        return is_delimiter(self.current_character, self.delimiters)

    @property
    def at_start_of_string(self) -> bool:
        return self.position == 0

    @property
    def at_end_of_string(self) -> bool:
        return self.position == len(self.text) - 1

    @property
    def at_start_of_word(self) -> bool:
        """Non-delimiter with nothing or a delimiter before it (single-character words count)"""
        if self.at_delimiter:
            return False
        return self.at_start_of_string or is_delimiter(
            self.previous_character, self.delimiters
        )

    @property
    def at_end_of_word(self) -> bool:
        if self.at_delimiter:
            return False
        return self.at_end_of_string or is_delimiter(
            self.next_character, self.delimiters
        )


# Scanner doubles as the editor-facing "cursor" primitive
Cursor = Scanner
