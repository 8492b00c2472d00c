# src/mancala_engine/api/routes.py
import logging

from flask import current_app
from flask_smorest import Blueprint, abort
from marshmallow import Schema, fields, validate, EXCLUDE

from mancala_engine.agents import available_agents, pick_action
from mancala_engine.engine.board import LENGTH, GameMode
from mancala_engine.engine.game import Game
from mancala_engine.io import profiles as profile_store

logger = logging.getLogger(__name__)

bp = Blueprint("mancala", __name__, url_prefix="/api")

MODES = [m.value for m in GameMode]

# ---------- Schemas ----------
class StateSchema(Schema):
    class Meta: unknown = EXCLUDE
    counts = fields.List(fields.Integer(validate=validate.Range(min=0)), required=True,
                         validate=validate.Length(equal=LENGTH))
    current_player = fields.Integer(required=True, validate=validate.OneOf([0, 1]))
    mode = fields.String(required=True, validate=validate.OneOf(MODES))
    over = fields.Boolean(load_default=False)
    winner = fields.Integer(allow_none=True, load_default=None, validate=validate.OneOf([0, 1]))

class NewGameSchema(Schema):
    class Meta: unknown = EXCLUDE
    mode = fields.String(load_default=None, validate=validate.OneOf(MODES))

class NewGameRespSchema(Schema):
    state = fields.Nested(StateSchema)

class HealthSchema(Schema):
    status = fields.String()
    modes  = fields.List(fields.String())
    agents = fields.List(fields.String())

class ApplyReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    state  = fields.Nested(StateSchema, required=True)
    action = fields.Integer(required=True, validate=validate.Range(min=0, max=LENGTH - 1))

class MoveReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    state = fields.Nested(StateSchema, required=True)
    agent = fields.String(load_default="random")

class CaptureSchema(Schema):
    pits   = fields.List(fields.Integer())
    store  = fields.Integer()
    stones = fields.Integer()

class TurnRespSchema(Schema):
    accepted   = fields.Boolean()
    action     = fields.Integer(allow_none=True)
    next_state = fields.Nested(StateSchema)
    outcome    = fields.String(allow_none=True)
    traces     = fields.List(fields.List(fields.Integer()))
    captures   = fields.List(fields.Nested(CaptureSchema))
    sweep      = fields.Nested(CaptureSchema, allow_none=True)
    winner     = fields.Integer(allow_none=True)
    over       = fields.Boolean()

class ProfileSchema(Schema):
    class Meta: unknown = EXCLUDE
    name = fields.String(required=True, validate=validate.Length(min=1, max=32))
    wins = fields.Integer(dump_only=True)
# -----------------------------

def _capture_dict(record):
    if record is None:
        return None
    return {"pits": list(record.pits), "store": record.store, "stones": record.stones}

def _load_game(state):
    try:
        return Game.from_state(state)
    except ValueError as e:
        abort(400, message=str(e))

def _play(state, action):
    game = _load_game(state)
    report = game.activate_pit(action) if action is not None else None
    if report is None:
        return {
            "accepted": False, "action": action, "next_state": game.to_state(),
            "outcome": None, "traces": [], "captures": [], "sweep": None,
            "winner": game.to_state()["winner"], "over": game.is_over,
        }
    return {
        "accepted": True,
        "action": action,
        "next_state": game.to_state(),
        "outcome": report.outcome.value,
        "traces": [list(t) for t in report.traces],
        "captures": [_capture_dict(c) for c in report.captures],
        "sweep": _capture_dict(report.sweep),
        "winner": int(report.winner) if report.winner is not None else None,
        "over": report.over,
    }

def _profiles_path():
    return current_app.config.get("PROFILES_PATH")

@bp.route("/health")
@bp.response(200, HealthSchema)
def health():
    return {"status": "ok", "modes": MODES, "agents": available_agents()}

@bp.route("/newgame", methods=["POST"])
@bp.arguments(NewGameSchema)
@bp.response(200, NewGameRespSchema)
def newgame(req):
    mode = req.get("mode") or current_app.config["DEFAULT_MODE"]
    return {"state": Game(GameMode(mode)).to_state()}

@bp.route("/apply", methods=["POST"])  # human move
@bp.arguments(ApplyReqSchema)
@bp.response(200, TurnRespSchema)
def apply(req):
    return _play(req["state"], req["action"])

@bp.route("/move", methods=["POST"])   # AI move
@bp.arguments(MoveReqSchema)
@bp.response(200, TurnRespSchema)
def move(req):
    a = pick_action(req["state"], req["agent"])
    return _play(req["state"], a)

@bp.route("/profiles")
@bp.response(200, ProfileSchema(many=True))
def list_profiles():
    return profile_store.load_profiles(_profiles_path())

@bp.route("/profiles", methods=["POST"])
@bp.arguments(ProfileSchema)
@bp.response(201, ProfileSchema)
def create_profile(req):
    try:
        return profile_store.add_profile(req["name"], _profiles_path())
    except profile_store.DuplicateProfile as e:
        abort(409, message=str(e))
    except profile_store.ProfileError as e:
        abort(400, message=str(e))

@bp.route("/profiles/<string:name>/win", methods=["POST"])
@bp.response(200, ProfileSchema)
def profile_win(name):
    try:
        return profile_store.record_win(name, _profiles_path())
    except profile_store.UnknownProfile as e:
        abort(404, message=str(e))
