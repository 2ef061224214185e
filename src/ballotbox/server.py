from __future__ import annotations

from .runtime.app import create_app

# Convenience for uvicorn: `uvicorn ballotbox.server:app`
# Reads BALLOTBOX_* settings on import; nothing inside the package imports this module.
app = create_app()
