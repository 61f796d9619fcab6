"""Plain-text rendering of a ShortcutStore, one card per application."""

from keyshorty.client.state import ShortcutStore

_RULE_WIDTH = 60


def render_book(store: ShortcutStore) -> str:
    if not store.applications:
        return "No applications yet. Add one with: keyshorty add-app NAME"

    cards = []
    for app in store.applications:
        shortcuts = store.shortcuts_for(app.id)
        header = f"{app.name} (app #{app.id})"
        lines = [header, "-" * max(len(header), _RULE_WIDTH)]
        if shortcuts:
            width = max(len(s.key_combination) for s in shortcuts)
            for s in shortcuts:
                lines.append(f"  {s.key_combination.ljust(width)}  {s.description}  [#{s.id}]")
        else:
            lines.append("  (no shortcuts)")
        cards.append("\n".join(lines))
    return "\n\n".join(cards)


def render_notification(message: str) -> str:
    return f"! {message}"
