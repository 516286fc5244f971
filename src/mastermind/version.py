"""Client version tracking.

CLIENT_VERSION is sent in the ``User-Agent`` header of every request so
server operators can tell client builds apart.

Bump rules:
- Patch (0.1.x): bug fixes, message tweaks
- Minor (0.x.0): new settings, new console output
- Major (x.0.0): protocol changes against the game server
"""

CLIENT_VERSION = "0.1.0"
