#!/usr/bin/env python
"""Script to run the task manager front-end."""
import uvicorn

from task_frontend.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "task_frontend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.development_mode,
    )
