"""Rendering of domain contents for people.

Pure functions from (player names, UUIDs, resolved profiles, groups) to
either a plain string or a ``TextComponent``.  ``CombinedDomain`` takes the
snapshots and the cache lookup; nothing here touches a lock.

The plain form sorts case-insensitively on the rendered entry (prefix
included), while the rich form sorts case-sensitively on the bare name.
Both orders are relied on by existing output and are kept as they are.
"""

from __future__ import annotations

from typing import Iterable, Mapping
from uuid import UUID

from region_domains.core.config import FormattingConfig
from region_domains.profile.models import Profile
from region_domains.text.components import TextComponent

SEPARATOR = ", "
SECTION_SEPARATOR = "; "


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------

def players_string(
    names: Iterable[str],
    unique_ids: Iterable[UUID],
    resolved: Mapping[UUID, Profile],
) -> str:
    """``name:<n>`` for names, ``<last name>*`` or ``uuid:<u>`` for UUIDs."""
    output = [f"name:{name}" for name in names]
    for uid in unique_ids:
        profile = resolved.get(uid)
        if profile is not None:
            output.append(f"{profile.name}*")
        else:
            output.append(f"uuid:{uid}")
    output.sort(key=str.lower)
    return SEPARATOR.join(output)


def groups_string(groups: Iterable[str]) -> str:
    return SEPARATOR.join(f"g:{group}" for group in groups)


def join_sections(players: str | None, groups: str | None) -> str:
    return SECTION_SEPARATOR.join(section for section in (players, groups) if section)


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

def _click_to_copy(label: TextComponent) -> TextComponent:
    return label.append(TextComponent.newline()).append(TextComponent.of("Click to copy"))


def _name_segment(name: str, unique_id: UUID | None, style: FormattingConfig) -> TextComponent:
    segment = TextComponent.of(name, style.player_color)
    if unique_id is None:
        hover = _click_to_copy(TextComponent.of("Name only", style.muted_color))
        return segment.hover_text(hover).copy_on_click(name)
    hover = _click_to_copy(
        TextComponent.of("Last known name of uuid: ", style.muted_color)
        .append(TextComponent.of(str(unique_id), style.detail_color))
    )
    return segment.hover_text(hover).copy_on_click(str(unique_id))


def unknown_uuids_label(count: int) -> str:
    return f"{count} unknown uuid{'' if count == 1 else 's'}"


def _unresolved_segment(unresolved: list[str], style: FormattingConfig) -> TextComponent:
    hover = (
        TextComponent.of("Unable to resolve the name for:", style.muted_color)
        .append(TextComponent.newline())
        .append(TextComponent.of("\n".join(unresolved), style.detail_color))
        .append(TextComponent.newline())
        .append(TextComponent.of("Click to copy"))
    )
    return (
        TextComponent.of(unknown_uuids_label(len(unresolved)), style.muted_color)
        .hover_text(hover)
        .copy_on_click(",".join(unresolved))
    )


def players_component(
    names: Iterable[str],
    unique_ids: Iterable[UUID],
    resolved: Mapping[UUID, Profile],
    style: FormattingConfig | None = None,
) -> TextComponent:
    """Sorted clickable names followed by a summary of unresolved UUIDs.

    A resolved name equal to a name-only entry replaces it.
    """
    style = style or FormattingConfig()
    profile_map: dict[str, UUID | None] = {name: None for name in names}
    unresolved: list[str] = []
    for uid in sorted(unique_ids, key=str):
        profile = resolved.get(uid)
        if profile is not None:
            profile_map[profile.name] = uid
        else:
            unresolved.append(str(uid))

    builder = TextComponent.builder()
    ordered = sorted(profile_map)
    for i, name in enumerate(ordered):
        builder.append(_name_segment(name, profile_map[name], style))
        if i < len(ordered) - 1 or unresolved:
            builder.append(TextComponent.of(SEPARATOR))
    if unresolved:
        builder.append(_unresolved_segment(unresolved, style))
    return builder.build()


def groups_component(groups: Iterable[str], style: FormattingConfig | None = None) -> TextComponent:
    style = style or FormattingConfig()
    builder = TextComponent.builder()
    groups = list(groups)
    for i, group in enumerate(groups):
        builder.append(TextComponent.of("g:", style.muted_color))
        builder.append(TextComponent.of(group, style.group_color))
        if i < len(groups) - 1:
            builder.append(TextComponent.of(SEPARATOR))
    return builder.build().hover_text(TextComponent.of("Groups"))
