# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn chatrelay.app:app --reload --host 0.0.0.0 --port $PORT`
"""

import uvicorn

from chatrelay.settings import get_settings

if __name__ == "__main__":
    uvicorn.run(
        "chatrelay.app:app",
        host="0.0.0.0",
        port=get_settings().PORT,
        reload=True,
    )
