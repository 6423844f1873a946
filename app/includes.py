from app.routes.rating.router import rating_router as rating


def get_all_routers():
    return [
        rating,
    ]
