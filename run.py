"""
Run the adgen application
"""
import uvicorn
from adgen.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "adgen.main:app",
        host="0.0.0.0",
        port=8201,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
