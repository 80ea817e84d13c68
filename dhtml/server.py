import json
from typing import Annotated, Dict, Literal, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field, ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response

from .ast_utils import format_tree_for_output
from .config import (
    ALLOWED_ORIGINS,
    HOST,
    PORT,
    RATE_LIMIT,
    RATE_WINDOW,
    SERVER_NAME,
    TRANSPORT,
    TRANSPORTS,
    log,
)
from .errors import InputTooLarge, TranspileError
from .rate_limiter import RateLimiter
from .transpiler import Transpiler

MCP_INSTRUCTIONS = """
The D.Ö.N.E.R transpiler server converts HTML written with German tag and attribute names into standard HTML.

Key capabilities:

1. Transpilation:
   - `transpile`: Convert German HTML (e.g. `<bereich klasse="box">Hallo</bereich>`) into indented HTML
   - `parse_tree`: Show the parsed document tree as JSON, useful to debug nesting problems

2. Vocabulary:
   - `get_dictionary`: List every supported German tag and attribute with its HTML name
   - `translate_name`: Look up a single tag or attribute name

Names that are not in the vocabulary are passed through unchanged, so plain HTML is accepted as well.
Markup must be well formed: every element needs a matching closing tag or a trailing `/>`.
"""

# Create MCP server
mcp = FastMCP(SERVER_NAME, instructions=MCP_INSTRUCTIONS, host=HOST, port=PORT)

transpiler = Transpiler()
rate_limiter = RateLimiter(RATE_LIMIT, RATE_WINDOW)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Content-Security-Policy": "default-src 'self'; script-src 'none'; object-src 'none';",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class TranspileRequest(BaseModel):
    content: str = ""


class TranspileResponse(BaseModel):
    result: str = ""
    error: Optional[str] = None


# --- Helper Functions ---


def get_client_ip(request: Request) -> str:
    """Return the client address, preferring proxy headers."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host
    return "unknown"


def response_headers(request: Request) -> Dict[str, str]:
    """Security headers plus CORS headers for allowed origins."""
    headers = dict(SECURITY_HEADERS)
    origin = request.headers.get("origin", "")
    if origin and origin in ALLOWED_ORIGINS:
        headers["Access-Control-Allow-Origin"] = origin
    headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    headers["Access-Control-Allow-Headers"] = "Content-Type"
    return headers


def _error(status_code: int, message: str, headers: Dict[str, str]) -> JSONResponse:
    body = TranspileResponse(error=message).model_dump(exclude_none=True)
    return JSONResponse(body, status_code=status_code, headers=headers)


# --- MCP Tools ---


@mcp.tool()
def transpile(
    content: Annotated[str, Field(description="German HTML markup to convert")],
) -> str:
    """Convert German HTML into formatted standard HTML."""
    try:
        return transpiler.transpile(content)
    except TranspileError as e:
        log.info(f"Transpile tool rejected input: {e}")
        return f"Error: {e}"


@mcp.tool()
def parse_tree(
    content: Annotated[str, Field(description="German HTML markup to parse")],
) -> str:
    """Parse German HTML and return the document tree as JSON."""
    try:
        document = transpiler.parse(content)
    except TranspileError as e:
        return f"Error: {e}"
    return json.dumps(format_tree_for_output(document), ensure_ascii=False, indent=2)


@mcp.tool()
def get_dictionary() -> str:
    """Return all supported German tags and attributes with their HTML names as JSON."""
    return json.dumps(transpiler.vocabulary.as_dict(), ensure_ascii=False, indent=2)


@mcp.tool()
def translate_name(
    name: Annotated[str, Field(description="German tag or attribute name")],
    kind: Literal["tag", "attribute"] = "tag",
) -> str:
    """Translate a single German tag or attribute name to its HTML name."""
    if kind == "tag":
        resolved = transpiler.vocabulary.resolve_tag(name)
    else:
        resolved = transpiler.vocabulary.resolve_attribute(name)

    if resolved is None:
        return f"'{name}' is not a known {kind}; it is passed through unchanged."
    return resolved


# --- HTTP Routes ---


@mcp.custom_route("/health", methods=["GET", "OPTIONS"])
async def health(request: Request) -> Response:
    headers = response_headers(request)
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=headers)
    return JSONResponse({"status": "ok"}, headers=headers)


@mcp.custom_route("/transpile", methods=["GET", "POST", "OPTIONS"])
async def transpile_endpoint(request: Request) -> Response:
    headers = response_headers(request)
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=headers)

    client_ip = get_client_ip(request)
    if not rate_limiter.allow(client_ip):
        log.warning(f"Rate limit exceeded for {client_ip}")
        return _error(429, "Rate limit exceeded. Please try again later.", headers)

    if request.method != "POST":
        return _error(405, "Method not allowed", headers)

    try:
        payload = TranspileRequest.model_validate_json(await request.body())
    except ValidationError:
        return _error(400, "Invalid JSON", headers)

    if not payload.content:
        return _error(400, "Content is required", headers)

    try:
        result = await run_in_threadpool(transpiler.transpile, payload.content)
    except InputTooLarge as e:
        log.info(f"Rejected oversized input from {client_ip}: {e}")
        return _error(413, str(e), headers)
    except TranspileError as e:
        log.info(f"Transpile failed for {client_ip}: {e}")
        return _error(422, str(e), headers)

    return JSONResponse(
        TranspileResponse(result=result).model_dump(exclude_none=True), headers=headers
    )


@mcp.custom_route("/dictionary", methods=["GET", "OPTIONS"])
async def dictionary_endpoint(request: Request) -> Response:
    headers = response_headers(request)
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=headers)
    return JSONResponse(transpiler.vocabulary.as_dict(), headers=headers)


@mcp.custom_route("/", methods=["GET", "OPTIONS"])
async def index(request: Request) -> Response:
    headers = response_headers(request)
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=headers)
    return HTMLResponse(
        """<!DOCTYPE html>
<html>
<head>
    <title>D.Ö.N.E.R API</title>
</head>
<body>
    <h1>D.Ö.N.E.R API Server</h1>
    <h2>Available Endpoints:</h2>
    <ul>
        <li><a href="/health">GET /health</a> - Health check</li>
        <li><a href="/dictionary">GET /dictionary</a> - View dictionary</li>
        <li>POST /transpile - Transpile German HTML</li>
    </ul>
</body>
</html>""",
        headers=headers,
    )


def main(
    transport: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> None:
    """Run the server with the given or configured transport."""
    transport = transport or TRANSPORT
    if transport not in TRANSPORTS:
        raise ValueError(f"Unknown transport '{transport}', expected one of {TRANSPORTS}")
    if host:
        mcp.settings.host = host
    if port:
        mcp.settings.port = port

    if transport == "stdio":
        log.info("Starting transpiler server on stdio")
    else:
        log.info(
            f"Starting transpiler server ({transport}) on "
            f"http://{mcp.settings.host}:{mcp.settings.port}"
        )
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
