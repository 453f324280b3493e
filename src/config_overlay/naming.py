from __future__ import annotations

from typing import List

_LOWER = 1
_UPPER = 2
_DIGIT = 3
_OTHER = 4


def _char_class(ch: str) -> int:
    if ch.isupper():
        return _UPPER
    if ch.isdigit():
        return _DIGIT
    # Caseless letters group with lower-case ones.
    if ch.isalnum():
        return _LOWER
    return _OTHER


def split_camel_case(identifier: str) -> List[str]:
    """
    Split a camel-case or Pascal-case identifier into words.

    Consecutive characters of the same class (lower, upper, digit, other) form a run.
    When an upper-case run is followed by a lower-case run, the last upper-case letter
    starts the next word, so "PDFLoader" splits into ["PDF", "Loader"]. Runs of
    characters that are neither letters nor digits are delimiters and are dropped.
    """
    runs: List[List[str]] = []
    last_class = 0
    for ch in identifier:
        cls = _char_class(ch)
        if runs and cls == last_class:
            runs[-1].append(ch)
        else:
            runs.append([ch])
        last_class = cls

    for i in range(len(runs) - 1):
        if _char_class(runs[i][0]) == _UPPER and _char_class(runs[i + 1][0]) == _LOWER:
            runs[i + 1].insert(0, runs[i].pop())

    return ["".join(run) for run in runs if run and _char_class(run[0]) != _OTHER]


def derive_env_name(field_name: str) -> str:
    """Return the environment variable name for a field, e.g. AppName -> APP_NAME."""
    return "_".join(word.upper() for word in split_camel_case(field_name))
