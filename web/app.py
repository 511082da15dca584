"""
Flask web server for the Wikipedia Agent.

Routes
──────
ANY  /health     Liveness probe (JSON)
ANY  /version    Service name + version (JSON)
POST /lookup     Body is a topic; responds with the page's lead summary (text)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import BadRequest, MethodNotAllowed

# Allow running as `python web/app.py` from the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

from config.settings import Settings
from core.errors import WikiLookupError
from core.fetcher import SummaryFetcher
from core.models import HealthStatus, VersionInfo
from core.provider import WikipediaProvider

logger = logging.getLogger(__name__)

#: Methods registered on every route; anything else (TRACE, PROPFIND, ...)
#: reaches the views through the MethodNotAllowed handler in create_app.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _text(body: str, status: int = 200, **headers: str) -> Response:
    return Response(body, status=status, mimetype="text/plain", headers=headers)


def create_app(
    settings: Settings | None = None,
    fetcher: SummaryFetcher | None = None,
) -> Flask:
    """Build the Flask application.

    Args:
        settings: Configuration; read from the environment when omitted.
        fetcher: Summary fetcher; a ``WikipediaProvider``-backed one is built
            from *settings* when omitted.

    Returns:
        A ready-to-serve ``Flask`` app.
    """
    settings = settings or Settings()
    if fetcher is None:
        provider = WikipediaProvider(
            lang=settings.lang,
            auto_suggest=settings.auto_suggest,
            user_agent=settings.effective_user_agent,
        )
        fetcher = SummaryFetcher(provider)

    app = Flask(__name__)
    # Byte-exact JSON bodies, including under --debug
    app.json.compact = True
    app.config["SETTINGS"] = settings
    app.extensions["summary_fetcher"] = fetcher

    # ── Probes ─────────────────────────────────────────────────────────────

    @app.route("/health", methods=ALL_METHODS)
    def health():
        return jsonify(HealthStatus().model_dump())

    @app.route("/version", methods=ALL_METHODS)
    def version():
        return jsonify(VersionInfo(version=settings.version).model_dump())

    # ── Lookup ─────────────────────────────────────────────────────────────

    @app.route("/lookup", methods=ALL_METHODS)
    def lookup():
        """Return the lead summary for the topic sent as the request body.

        Responses:
          200  summary text
          405  method is not POST (body is never read)
          400  body could not be read
          500  ``lookup error: <details>``
        """
        if request.method != "POST":
            return _text("POST required", 405, Allow="POST")

        try:
            raw = request.get_data(cache=False)
        except (BadRequest, OSError) as exc:
            logger.warning("Could not read /lookup body: %s", exc)
            return _text("cannot read body", 400)

        topic = raw.decode("utf-8", errors="replace")

        try:
            summary = fetcher.fetch(topic)
        except WikiLookupError as exc:
            return _text(f"lookup error: {exc}", 500)

        return _text(summary)

    @app.errorhandler(MethodNotAllowed)
    def any_method(exc: MethodNotAllowed):
        """Route methods outside ALL_METHODS to the view for the path."""
        views = {"/health": health, "/version": version, "/lookup": lookup}
        view = views.get(request.path)
        if view is None:
            return exc
        return view()

    return app


# ── Entry point ────────────────────────────────────────────────────────────

def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wikipedia-agent",
        description="Serve Wikipedia lead summaries over HTTP.",
    )
    parser.add_argument("--host", help="listen address (env HOST, default 0.0.0.0)")
    parser.add_argument("--port", type=int, help="listen port (env PORT, default 8080)")
    parser.add_argument("--lang", help="Wikipedia language prefix (env WIKI_LANG, default en)")
    parser.add_argument("--version-string", help="version reported by /version (env APP_VERSION)")
    parser.add_argument("--debug", action="store_true", help="run Flask in debug mode")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    args = _parse_args(argv)

    settings = Settings()
    if args.host:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    if args.lang:
        settings.lang = args.lang
    if args.version_string:
        settings.version = args.version_string
    if args.debug:
        settings.debug = True

    try:
        settings.validate()
    except ValueError as exc:
        logger.critical("Invalid configuration: %s", exc)
        sys.exit(1)

    app = create_app(settings)
    logger.info(
        "Wikipedia Agent v%s listening on %s:%d",
        settings.version, settings.host, settings.port,
    )
    try:
        app.run(debug=settings.debug, host=settings.host, port=settings.port)
    except OSError as exc:
        logger.critical("Cannot listen on %s:%d: %s", settings.host, settings.port, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
