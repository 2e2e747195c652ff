import uuid
from flask import request, g

def request_context_middleware(app):
    @app.before_request
    def assign_request_id():
        incoming = request.headers.get("X-Request-ID", "").strip()
        g.request_id = incoming[:36] if incoming else uuid.uuid4().hex[:8]

    @app.after_request
    def echo_request_id(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response
