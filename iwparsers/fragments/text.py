"""
Text fragments

Names, titles, free text and parenthesized lists.
"""

# Characters allowed in a player name
_NAME_CHAR = r'[a-zA-Z0-9.\-_+*()={}]'
# Up to 28 inner characters; a space is fine unless another one follows
_NAME_INNER = r'(?:' + _NAME_CHAR + r'| (?! )){0,28}'

# One "(...)" group with at most one level of nesting, never spanning lines
_PAREN_GROUP = r'\((?:[^\n()]+(?:\([^\n()]*\)[^\n()]*)*)\)'


def bracket_string() -> str:
    """
    One or more parenthesized groups separated by single spaces.

    "(Raumfahrt) (Hyperraumantrieb (Grundlagen))" matches as a whole.
    """
    return '(?:' + _PAREN_GROUP + r'(?:\s' + _PAREN_GROUP + ')*)'


def user_name() -> str:
    """Player name: at most 30 characters, no leading, trailing or doubled spaces."""
    return (
        r'(?:(?<![^\s>])' + _NAME_CHAR
        + '(?:' + _NAME_INNER + _NAME_CHAR + r')?(?![^\s.<]))'
    )


def low_user_name() -> str:
    """Player name without surrounding anchors, for use inside larger tokens."""
    return '(?:' + _NAME_CHAR + '(?:' + _NAME_INNER + _NAME_CHAR + ')?)'


def user_title() -> str:
    """Free-form title: any characters on one line, same space rules as names."""
    return r'(?:(?<!\S)\S(?:(?:\S| (?! )){0,28}\S)?(?!\S))'


def user_rank() -> str:
    """Alliance role. Longer labels come before the labels they start with."""
    return (
        r'(?:Hasenpriester|interner\sHC|(?<!interner\s)HC'
        r'|Mitgliederverwalter|Memberverwalter|Mitglieder|Member)'
    )


def government_form() -> str:
    return (
        r'(?:Monarchie|Diktatur|Kommunismus|Demokratie'
        r'|unzivilisierte\sBarbarei|Barbarismus)'
    )


def text() -> str:
    """Anything, across lines when DOTALL is set."""
    return r'(?:.*)'


def single_line_text() -> str:
    return r'(?:[^\n]*)'


def single_line_text3() -> str:
    """At least three characters on one line, no tabs."""
    return r'(?:[^\n\t]{3,})'
