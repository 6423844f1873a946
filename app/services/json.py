from fastapi.responses import JSONResponse
from fastapi import status


def return_json(data=None, code: int = status.HTTP_200_OK):
    return JSONResponse(status_code=code, content=data)


def return_error_json(error: str = "Error", details: str = None, code: int = status.HTTP_400_BAD_REQUEST):
    content = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=code, content=content)
