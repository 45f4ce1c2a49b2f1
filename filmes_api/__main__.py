import uvicorn

from filmes_api.core.config import settings

if __name__ == "__main__":
    uvicorn.run("filmes_api.app:app", host="0.0.0.0", port=8000, reload=settings.ENV == "development")
