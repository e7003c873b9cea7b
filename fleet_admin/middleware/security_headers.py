from fastapi import Request

# No Content-Security-Policy: the site relies on inline scripts and styles.
SECURITY_HEADERS = {
    "X-Content-Type-Options":       "nosniff",
    "X-Frame-Options":              "SAMEORIGIN",
    "Referrer-Policy":              "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response
