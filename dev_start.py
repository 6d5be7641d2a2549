#!/usr/bin/env python3
"""
Linkwave Chatbot Development Startup Script

This script provides a development environment setup with:
1. Environment validation
2. Provider configuration check
3. Offline smoke test of the gating and post-processing pipeline
4. Server startup with proper configuration
"""

import os
import sys
import asyncio
import shutil
import time
import uvicorn
from pathlib import Path

def setup_environment():
    """Setup development environment."""
    print("🚀 Setting up Linkwave Chatbot Development Environment...")

    # Check if we're in the right directory
    current_dir = Path.cwd()
    expected_files = ['app', 'pyproject.toml', 'run.py']

    for file in expected_files:
        if not (current_dir / file).exists():
            print(f"❌ Error: {file} not found. Are you in the correct directory?")
            print(f"Current directory: {current_dir}")
            return False

    print(f"✅ Working directory: {current_dir}")

    # Check Python version
    python_version = sys.version_info
    if python_version.major < 3 or (python_version.major == 3 and python_version.minor < 10):
        print(f"❌ Error: Python 3.10+ required, found {python_version.major}.{python_version.minor}")
        return False

    print(f"✅ Python version: {python_version.major}.{python_version.minor}.{python_version.micro}")

    # Setup environment variables
    env_file = current_dir / '.env'
    env_example_file = current_dir / '.env.example'

    if not env_file.exists() and env_example_file.exists():
        print("📝 Creating .env file from template...")
        shutil.copy(env_example_file, env_file)
        print("✅ Created .env file")

    return True

def check_provider():
    """Report which completion provider will be used."""
    print("\n🔍 Checking Completion Provider...")

    from app.core.config import settings

    if settings.CHAT_PROVIDER == "openai":
        print(f"✅ OpenAI provider configured (model {settings.OPENAI_MODEL})")
    else:
        print("⚠️  OPENAI_API_KEY not set, using the local rule-based provider")
    return True

async def test_chat_pipeline():
    """Run a few messages through the pipeline with the local provider."""
    print("\n🧮 Testing Chat Pipeline...")

    try:
        from app.core.prompts import DEFAULT_SYSTEM_PROMPT
        from app.services.chat import ChatService, validate_chat_request
        from app.services.chat.completion import CompletionAdapter
        from app.services.chat.provider import LocalChatProvider

        service = ChatService(CompletionAdapter(LocalChatProvider(), DEFAULT_SYSTEM_PROMPT))
        test_cases = [
            "hello",
            "what is the weather today",
            "What does DAS pricing look like?",
        ]

        for text in test_cases:
            start_time = time.time()
            request = validate_chat_request({"message": text})
            reply = await service.reply(request.message, request.history)
            elapsed = (time.time() - start_time) * 1000
            print(f"   {text!r} → consultation={reply.consultation_intent} "
                  f"short_circuit={reply.short_circuited} ({elapsed:.1f} ms)")

        return True

    except Exception as e:
        print(f"❌ Chat pipeline test failed: {e}")
        return False

def start_server():
    """Start the development server."""
    print("\n🌐 Starting Development Server...")

    from app.core.config import settings

    try:
        # Configure uvicorn for development
        config = uvicorn.Config(
            "app.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=True,
            reload_dirs=["app"],
            log_level="info",
            access_log=True
        )

        server = uvicorn.Server(config)

        print("✅ Server configuration loaded")
        print(f"🌐 Starting server on http://localhost:{settings.PORT}")
        print(f"📚 API Documentation: http://localhost:{settings.PORT}/docs")
        print(f"💚 Health Check: http://localhost:{settings.PORT}/health")
        print("\nPress Ctrl+C to stop the server")

        server.run()

    except Exception as e:
        print(f"❌ Failed to start server: {e}")
        return False

async def main():
    """Main development startup function."""
    print("=" * 60)
    print("🚀 Linkwave Chatbot - Development Environment Startup")
    print("=" * 60)

    # Setup environment
    if not setup_environment():
        print("❌ Environment setup failed")
        return

    check_provider()
    await test_chat_pipeline()

if __name__ == "__main__":
    sys.path.insert(0, str(Path(__file__).parent))
    os.environ.setdefault("ENVIRONMENT", "development")
    try:
        asyncio.run(main())
        # uvicorn runs its own event loop
        start_server()
    except KeyboardInterrupt:
        print("\n👋 Development server stopped")
    except Exception as e:
        print(f"\n❌ Startup failed: {e}")
        sys.exit(1)
