"""Theme colors and color utilities for the UI."""


class GameColors:
    """Dark board palette with the four classic pad colours."""

    BG_TOP = "#1b2735"
    BG_BOTTOM = "#090a0f"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"

    TEXT_PRIMARY = "#ffffff"
    TEXT_MUTED = "#90a4ae"

    # Status colour categories used by the game controller
    LIGHT_RED = "#ff8a80"
    GREEN = "#69f0ae"
    WHITE = "#ffffff"

    # Pads in button-index order
    PADS = ("#2e7d32", "#c62828", "#f9a825", "#1565c0")


STATUS_COLORS = {
    "ready": GameColors.LIGHT_RED,
    "player": GameColors.GREEN,
    "over": GameColors.WHITE,
}


def status_color(category: str) -> str:
    """Map a status colour category to a hex colour; unknown categories are white."""
    return STATUS_COLORS.get(category, GameColors.WHITE)


def pad_color(index: int) -> str:
    return GameColors.PADS[index % len(GameColors.PADS)]


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except (TypeError, ValueError):
        return a


def lit_color(index: int) -> str:
    """Brightened pad colour shown while a pad is pressed or highlighted."""
    return blend_hex(pad_color(index), "#FFFFFF", 0.55)
