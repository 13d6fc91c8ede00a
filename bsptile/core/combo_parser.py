"""
bsptile.core.combo_parser - Parser de combos de teclado.

Convierte strings de configuracion como "alt+shift+t" en los argumentos
(modifiers, vk) que necesita HotkeyManager.register().

    - Aliases: win = super, ctrl = control.
    - Case-insensitive: "Alt+Shift+T" == "alt+shift+t".
    - Exactamente una tecla no modificadora por combo.
"""

from __future__ import annotations

from bsptile.core import win32


_MODIFIER_MAP: dict[str, int] = {
    "alt": win32.MOD_ALT,
    "ctrl": win32.MOD_CONTROL,
    "control": win32.MOD_CONTROL,
    "shift": win32.MOD_SHIFT,
    "win": win32.MOD_WIN,
    "super": win32.MOD_WIN,
}

_SPECIAL_KEYS: dict[str, int] = {
    "return": 0x0D,
    "enter": 0x0D,
    "space": 0x20,
    "tab": 0x09,
    "escape": 0x1B,
    "home": 0x24,
    "end": 0x23,
    "insert": 0x2D,
    "pause": 0x13,
    "printscreen": 0x2C,
}


def _vk_for(name: str) -> int | None:
    """Virtual key code for a single key name, or None if unknown."""
    if len(name) == 1 and ("a" <= name <= "z" or "0" <= name <= "9"):
        # VK codes for letters and digits are their uppercase ASCII codes
        return ord(name.upper())
    if name.startswith("f") and name[1:].isdigit() and 1 <= int(name[1:]) <= 24:
        return 0x70 + int(name[1:]) - 1  # VK_F1 = 0x70
    return _SPECIAL_KEYS.get(name)


class ComboParseError(ValueError):
    """Raised when a combo string cannot be parsed."""


def parse_combo(combo: str) -> tuple[int, int]:
    """
    Parse a keyboard combo string into (modifiers, vk).

    Raises:
        ComboParseError: If the combo is empty, has no key part or more
                         than one, contains unknown tokens, or repeats
                         a modifier.
    """
    parts = [p.strip().lower() for p in combo.split("+") if p.strip()]
    if not parts:
        raise ComboParseError(f"Empty combo string: {combo!r}")

    modifiers = 0
    vk: int | None = None

    for part in parts:
        if part in _MODIFIER_MAP:
            flag = _MODIFIER_MAP[part]
            if modifiers & flag:
                raise ComboParseError(
                    f"Duplicate modifier {part!r} in combo: {combo!r}"
                )
            modifiers |= flag
            continue

        code = _vk_for(part)
        if code is None:
            raise ComboParseError(
                f"Unknown key or modifier: {part!r} in combo: {combo!r}"
            )
        if vk is not None:
            raise ComboParseError(
                f"Multiple key parts in combo: {combo!r}. "
                f"Only one non-modifier key is allowed."
            )
        vk = code

    if vk is None:
        raise ComboParseError(
            f"No key found in combo: {combo!r}. "
            f"A combo must have exactly one non-modifier key."
        )

    return modifiers, vk
