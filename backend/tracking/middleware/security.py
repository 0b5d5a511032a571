from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

#headers added to every response
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff", #Prevents browsers from interpreting files as a different MIME type.
    "X-Frame-Options": "DENY", #Prevents clickjacking by disallowing embedding in iframes.
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains", #Forces HTTPS for a year.
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'", #JSON API, nothing to load
}

#Adds security headers to API responses.
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Security middleware adding protective response headers."""

    async def dispatch(self, request: Request, call_next):
        #Calls the next middleware (call_next) and waits for the response.
        response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        return response

    #Keeps no per-client state, so any number of workers can serve requests independently.
