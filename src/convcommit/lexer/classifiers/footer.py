"""Footer line classifier mixin."""

from convcommit.lexer.modes import WORD_BREAK
from convcommit.nodes import SeparatorKind

# The one footer key allowed to contain a space
_BREAKING_CHANGE = "BREAKING CHANGE"


class FooterClassifierMixin:
    """Mixin providing footer line classification.

    Pure logic: inspects a line without touching lexer position.

    """

    def _classify_footer(self, line: str) -> tuple[int, SeparatorKind] | None:
        """Try to classify a body line as a footer.

        A footer line starts with a key immediately followed by ``": "``
        or ``" #"``. The key is a single word, or ``BREAKING CHANGE`` in
        any case.

        Args:
            line: Line content without its line break

        Returns:
            (key_length, separator_kind) if the line is a footer, None otherwise.
        """
        key_len = len(_BREAKING_CHANGE)
        if line[:key_len].upper() != _BREAKING_CHANGE:
            key_len = 0
            line_len = len(line)
            while key_len < line_len and line[key_len] not in WORD_BREAK:
                key_len += 1
            if key_len == 0:
                return None

        if line.startswith(": ", key_len):
            return key_len, SeparatorKind.COLON_SPACE
        if line.startswith(" #", key_len):
            return key_len, SeparatorKind.SPACE_HASH
        return None
