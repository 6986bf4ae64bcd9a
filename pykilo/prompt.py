"""Line-oriented prompt shown in the message bar.

Used for Save-As and incremental search. The prompt only needs two hooks
from the session: a key source and a way to show the current prompt text.
"""

from __future__ import annotations

from collections.abc import Callable

from .input import keys

PromptCallback = Callable[[str, str], None]


def prompt(
    template: str,
    *,
    read_key: Callable[[], str],
    show: Callable[[str], None],
    callback: PromptCallback | None = None,
) -> str:
    """Collect a line of input; return it, or ``""`` when cancelled.

    ``template`` contains one ``{}`` where the typed text is shown. Enter
    with an empty line and Esc both cancel. ``callback`` receives the
    current input and the key after every keystroke that does not end the
    prompt.
    """
    text = ""
    while True:
        show(template.format(text))
        key = read_key()

        if key == keys.ESC or key == "":
            show("")
            return ""
        if key == keys.ENTER:
            show("")
            return text
        if key == keys.BACKSPACE:
            text = text[:-1]
        elif key == keys.TAB:
            text += "\t"
        elif keys.is_printable_key(key):
            text += key

        if callback is not None:
            callback(text, key)
