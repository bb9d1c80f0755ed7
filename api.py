# api.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rescisao.config import settings
from rescisao.logging_config import log
from rescisao.router import router as rescisao_router

app = FastAPI(title=f"{settings.APP_NAME} - API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(rescisao_router)


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


log.info(f"{settings.APP_NAME}: API inicializada.")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api:app", host="0.0.0.0", port=8000, reload=True)
