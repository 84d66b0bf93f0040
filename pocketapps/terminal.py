"""Small helpers for drawing on a text terminal."""

import os
import subprocess


def border(length=60, symbol="_"):
    """Return a horizontal rule made of *length* copies of *symbol*."""
    return symbol * length


def clear_screen():
    """Clear the terminal with the platform's own command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        # No clear command available; leave the screen as it is.
        pass