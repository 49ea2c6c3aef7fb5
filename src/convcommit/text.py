"""Text preparation for raw commit messages.

Example:
    >>> from convcommit.text import strip_comments
    >>> strip_comments("feat: x\\n# Please enter the commit message\\n")
    'feat: x'
"""

# Whitespace the lexer folds into a blank line ("\r" from "\r\n" endings)
_BLANK_CHARS = " \t\r"


def strip_comments(message: str, comment_char: str = "#") -> str:
    """Remove comment lines the way git does for ``COMMIT_EDITMSG``.

    Lines starting with ``comment_char`` are dropped, then leading and
    trailing blank lines are trimmed. Only ``\\n`` separates lines, the
    same as in the lexer; kept lines are returned byte for byte,
    ``\\r\\n`` endings included.

    Args:
        message: Raw message as written by the editor
        comment_char: Leading character marking a comment line

    Returns:
        Message without comment lines.
    """
    lines = message.split("\n")
    last = len(lines) - 1
    kept = [(i, line) for i, line in enumerate(lines) if not line.startswith(comment_char)]
    while kept and not kept[0][1].strip(_BLANK_CHARS):
        kept.pop(0)
    while kept and not kept[-1][1].strip(_BLANK_CHARS):
        kept.pop()
    if not kept:
        return ""

    text = "\n".join(line for _, line in kept)
    # The final line lost its "\n"; drop the "\r" that paired with it
    if kept[-1][0] < last and text.endswith("\r"):
        text = text[:-1]
    return text
