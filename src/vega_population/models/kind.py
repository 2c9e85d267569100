"""Item kinds and the name prefixes that select them."""

from enum import Enum


class ItemKind(Enum):
    """Type of population item."""

    SKILL = "skill"
    PERSONA = "persona"
    PROFILE = "profile"

    def __str__(self) -> str:
        return self.value

    @property
    def plural(self) -> str:
        """Plural form used as the directory segment in sources and installs."""
        return f"{self.value}s"

    @property
    def prefix(self) -> str:
        """Display prefix: none for skills, @ for personas, + for profiles."""
        return _PREFIXES[self]


_PREFIXES: dict[ItemKind, str] = {
    ItemKind.SKILL: "",
    ItemKind.PERSONA: "@",
    ItemKind.PROFILE: "+",
}

# Canonical ordering for listing, cache refresh and cross-kind tie-breaks
ALL_KINDS: tuple[ItemKind, ...] = (ItemKind.SKILL, ItemKind.PERSONA, ItemKind.PROFILE)

# Values accepted by --kind options
KIND_CHOICES: tuple[str, ...] = tuple(kind.value for kind in ALL_KINDS)


def parse_item_name(text: str) -> tuple[ItemKind, str]:
    """Split a user-supplied name into its kind and bare name.

    Names prefixed with @ are personas, + are profiles, unprefixed are skills.

    Examples:
        >>> parse_item_name("@incident-commander")
        (<ItemKind.PERSONA: 'persona'>, 'incident-commander')
        >>> parse_item_name("kubernetes-ops")
        (<ItemKind.SKILL: 'skill'>, 'kubernetes-ops')
    """
    if text.startswith("@"):
        return ItemKind.PERSONA, text[1:]
    if text.startswith("+"):
        return ItemKind.PROFILE, text[1:]
    return ItemKind.SKILL, text


def format_item_name(kind: ItemKind, name: str) -> str:
    """Return the display name with the prefix for its kind."""
    return f"{kind.prefix}{name}"


def validate_item_kind(value: str) -> ItemKind:
    """Validate and return an item kind.

    Args:
        value: Kind name ("skill", "persona" or "profile")

    Returns:
        Matching ItemKind

    Raises:
        ValueError: If value is not a known kind
    """
    for kind in ALL_KINDS:
        if kind.value == value:
            return kind
    raise ValueError(f"Invalid item kind: {value}")
