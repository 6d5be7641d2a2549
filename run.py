#!/usr/bin/env python3
"""
Linkwave Chatbot API
Simple startup script for the API server
"""

import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    print(f"Starting {settings.APP_NAME}...")
    print(f"Chat endpoint: http://localhost:{settings.PORT}/api/chat")
    print(f"Health Check: http://localhost:{settings.PORT}/health")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
