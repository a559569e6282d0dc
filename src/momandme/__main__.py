"""Run with: python -m momandme"""

import uvicorn

from momandme.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "momandme.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
