from fastapi import FastAPI

from .routers import calculations

app = FastAPI(
    title="tablecalc",
    description="Column tables, allocation rules and totals",
    version="0.1.0"
)

# API routes
app.include_router(calculations.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "tablecalc"}
