"""
Naming helpers shared by the code generators.

  camel_case       wire name → property / parameter name
  safe_identifier  keeps generated names out of Python's keyword list
  variant_labels   union case types → short, unique variant labels
  indent           embeds generated code one level deeper
"""

import keyword

INDENT_UNIT = "\t"


def camel_case(wire_name: str) -> str:
    """
    snake_case → lowerCamelCase.

    The first segment is lower-cased, every later segment capitalized, and
    empty segments (leading, trailing or doubled underscores) disappear.
    """
    segments = [segment for segment in wire_name.split("_") if segment]
    return "".join(
        segment.capitalize() if index else segment.lower()
        for index, segment in enumerate(segments)
    )


def safe_identifier(name: str) -> str:
    """Append an underscore to names that are Python keywords (from → from_)."""
    return f"{name}_" if keyword.iskeyword(name) else name


def _is_word_boundary(label: str, index: int) -> bool:
    if index <= 0 or index >= len(label):
        return True
    return label[index].isupper() or label[index].isdigit()


def common_prefix_length(labels: list[str]) -> int:
    """Longest prefix shared by every label, grown one character at a time."""
    first = labels[0]
    length = 0
    while length < len(first) and all(
        label.startswith(first[:length + 1]) for label in labels
    ):
        length += 1
    return length


def common_suffix_length(labels: list[str]) -> int:
    """Mirror of common_prefix_length for the shared tail."""
    first = labels[0]
    length = 0
    while length < len(first) and all(
        label.endswith(first[len(first) - length - 1:]) for label in labels
    ):
        length += 1
    return length


def variant_labels(cases: list[str]) -> list[str]:
    """
    Derive one variant label per union case.

    The prefix and suffix shared by all cases are stripped, backed off to
    camel-case word boundaries so "InputMediaPhoto" / "InputMediaVideo" give
    "photo" / "video" and not "phot" / "vide". The first remaining character
    is lower-cased. A label the stripping would consume entirely is kept
    intact; duplicates get a numeric suffix.
    """
    if not cases:
        return []

    prefix = common_prefix_length(cases)
    while prefix and not all(_is_word_boundary(case, prefix) for case in cases):
        prefix -= 1

    suffix = common_suffix_length(cases)
    while suffix and not all(_is_word_boundary(case, len(case) - suffix) for case in cases):
        suffix -= 1

    labels = []
    seen: dict[str, int] = {}
    for case in cases:
        if prefix + suffix >= len(case):
            label = case
        else:
            stem = case[prefix:len(case) - suffix]
            label = stem[:1].lower() + stem[1:]

        label = safe_identifier(label)
        if label in seen:
            seen[label] += 1
            label = f"{label}{seen[label]}"
        else:
            seen[label] = 1
        labels.append(label)

    return labels


def indent(code: str, levels: int = 1) -> str:
    """Prefix every non-empty line with one indent unit per level."""
    prefix = INDENT_UNIT * levels
    return "\n".join(prefix + line if line else line for line in code.split("\n"))
