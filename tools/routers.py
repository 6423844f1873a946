from fastapi import FastAPI


def gather_routers(app: FastAPI, routers: list, prefix: str = "") -> FastAPI:
    """Mount every router on ``app`` under an optional common prefix."""
    for router in routers:
        app.include_router(router, prefix=prefix)
    return app
