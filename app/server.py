from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.api.routers import analytics_router, products_router, sales_router
from app.api.graphql.router import graphql_router
from app.core.config import get_settings
from app.core.logging import setup_logging

settings = get_settings()
setup_logging()

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The REST paths match the ones the point-of-sale front end already calls
app.include_router(products_router.router, tags=["products"])
app.include_router(sales_router.router, tags=["sales"])
app.include_router(analytics_router.router, tags=["analytics"])
app.include_router(graphql_router, prefix="/graphql", tags=["graphql"])

@app.get("/", tags=["Root"])
async def read_root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}

if __name__ == "__main__":
    uvicorn.run("app.server:app", host="0.0.0.0", port=3000, reload=True)
