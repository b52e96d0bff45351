"""Line patterns shared by the section parsers."""

from __future__ import annotations

import re

BULLET_PATTERN = re.compile(r"^(?P<indent>[ \t]*)[-*+](?:[ \t]+(?P<text>.*?))?[ \t]*$")
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
