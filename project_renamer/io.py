import os
import re

from rich.console import Console
from rich.style import Style as RichStyle
from rich.text import Text

HEX_COLOR_RE = re.compile(r"^[0-9a-fA-F]{3}([0-9a-fA-F]{3})?$")


def ensure_hash_prefix(color):
    """Add a # to bare hex colors like 'FF2222'."""
    if color and isinstance(color, str) and HEX_COLOR_RE.match(color):
        return f"#{color}"
    return color


class InputOutput:
    """Terminal output for project-renamer, rendered with rich."""

    def __init__(
        self,
        pretty=True,
        tool_output_color=None,
        tool_error_color="red",
        tool_warning_color="#FFA500",
        verbose=False,
        output=None,
    ):
        no_color = os.environ.get("NO_COLOR")
        if no_color is not None and no_color != "":
            pretty = False

        self.pretty = pretty
        self.verbose = verbose

        self.tool_output_color = tool_output_color if pretty else None
        self.tool_error_color = tool_error_color if pretty else None
        self.tool_warning_color = tool_warning_color if pretty else None
        if pretty:
            self.tool_output_color = ensure_hash_prefix(self.tool_output_color)
            self.tool_error_color = ensure_hash_prefix(self.tool_error_color)
            self.tool_warning_color = ensure_hash_prefix(self.tool_warning_color)

        if pretty:
            self.console = Console(file=output)
        else:
            self.console = Console(file=output, force_terminal=False, no_color=True)

    def _tool_message(self, message="", strip=True, color=None):
        if message.strip():
            if strip:
                message = message.strip()

        style = dict(style=color) if self.pretty and color else dict()
        try:
            self.console.print(Text(message), soft_wrap=True, **style)
        except UnicodeEncodeError:
            # Some terminals can't render every character in a file name
            message = message.encode("ascii", errors="replace").decode("ascii")
            self.console.print(Text(message), soft_wrap=True, **style)

    def tool_output(self, *messages, bold=False):
        messages = list(map(str, messages))
        style = dict()
        if self.pretty:
            if self.tool_output_color:
                style["color"] = self.tool_output_color
            style["bold"] = bold
        style = RichStyle(**style)
        try:
            self.console.print(*messages, style=style, soft_wrap=True, markup=False)
        except UnicodeEncodeError:
            messages = [msg.encode("ascii", errors="replace").decode("ascii") for msg in messages]
            self.console.print(*messages, style=style, soft_wrap=True, markup=False)

    def tool_warning(self, message="", strip=True):
        self._tool_message(message, strip, self.tool_warning_color)

    def tool_error(self, message="", strip=True):
        self._tool_message(message, strip, self.tool_error_color)
