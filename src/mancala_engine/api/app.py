import logging
import os

from flask import Flask, jsonify, Response
from flask_smorest import Api
from flask_cors import CORS
from mancala_engine.api.routes import bp
from mancala_engine.engine.board import GameMode
from mancala_engine.io.profiles import PROFILES_PATH

SWAGGER_CSS = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui.css"
SWAGGER_BUNDLE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-bundle.js"
SWAGGER_STANDALONE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-standalone-preset.js"

# ---------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------
DEFAULT_MODE = os.getenv("MANCALA_DEFAULT_MODE", GameMode.AVALANCHE.value)
LOG_LEVEL = os.getenv("MANCALA_LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv(
    "MANCALA_CORS_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:8080,http://127.0.0.1:8080",
).split(",") if o.strip()]

logger = logging.getLogger(__name__)


def create_app(config=None):
    app = Flask(__name__)

    # smorest OpenAPI basics (still useful for schema generation)
    app.config["API_TITLE"] = "Mancala Engine (Flask)"
    app.config["API_VERSION"] = "v1"
    app.config["OPENAPI_VERSION"] = "3.0.3"

    app.config["DEFAULT_MODE"] = DEFAULT_MODE
    app.config["PROFILES_PATH"] = PROFILES_PATH
    if config:
        app.config.update(config)
    # unknown default mode raises here
    GameMode(app.config["DEFAULT_MODE"])

    api = Api(app)               # build spec
    api.register_blueprint(bp)   # /api/* endpoints

    # Allow the UI origins to call /api/*
    CORS(app, resources={r"/api/*": {"origins": CORS_ORIGINS}})

    # --- Manual docs: /openapi.json + /apidocs --------------------------------
    @app.get("/openapi.json")
    def openapi_json():
        # api.spec is an APISpec; jsonify the dict form
        return jsonify(api.spec.to_dict())

    @app.get("/apidocs")
    def apidocs():
        html = f"""
<!doctype html>
<html>
  <head>
    <meta charset="utf-8"/>
    <title>Mancala Engine API Docs</title>
    <link rel="stylesheet" href="{SWAGGER_CSS}">
    <style>body {{ margin:0; background:#fafafa; }}</style>
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="{SWAGGER_BUNDLE}"></script>
    <script src="{SWAGGER_STANDALONE}"></script>
    <script>
      window.onload = () => {{
        SwaggerUIBundle({{
          url: "/openapi.json",
          dom_id: "#swagger-ui",
          presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
          layout: "StandaloneLayout"
        }});
      }};
    </script>
  </body>
</html>"""
        return Response(html, mimetype="text/html")
    # --------------------------------------------------------------------------

    logger.info("app ready (default mode %s, profiles at %s)",
                app.config["DEFAULT_MODE"], app.config["PROFILES_PATH"])
    return app

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app().run(host="0.0.0.0", port=8000, debug=True)
