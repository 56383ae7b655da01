"""Quick start script for running the application"""
import uvicorn
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from app.core.config import settings  # noqa: E402


def main():
    """Run the FastAPI application with host/port taken from settings"""
    print("=" * 60)
    print(f"{settings.PROJECT_NAME} v{settings.VERSION}")
    print("=" * 60)
    print(f"\nDatabase: {settings.DATABASE_URL}")
    print(f"Users API: http://{settings.HOST}:{settings.PORT}{settings.API_V1_PREFIX}/users")
    print(f"Interactive docs at: http://{settings.HOST}:{settings.PORT}/docs")
    print("\nPress CTRL+C to stop\n")

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
