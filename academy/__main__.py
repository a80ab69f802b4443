import uvicorn

from academy.settings import settings

if __name__ == "__main__":
    uvicorn.run("academy.main:app", host=settings.host, port=settings.port, reload=settings.is_development)
