"""Minimal Flask API over one in-memory ElectionService.

Endpoints:
- POST /init -> start a fresh election
- POST /voters -> register {"name": ..., "credential": ...}
- GET /voters/<name> -> {"name": ..., "has_voted": ...}
- POST /candidates -> add {"name": ..., "affiliation": ...}
- GET /candidates/<name> -> {"name": ..., "affiliation": ...}
- POST /cast -> cast {"voter": ..., "credential": ..., "candidate": ...}
- GET /results -> {"results": [{"candidate", "affiliation", "tally"}, ...]}
- GET / -> results rendered as a small HTML page
"""

import logging
from typing import Any, Dict

from flask import Flask, jsonify, render_template_string, request

from election_sim import config
from election_sim.ballot import log_observer
from election_sim.errors import DuplicateRegistrationError
from election_sim.models import Voter
from election_sim.service import ElectionService

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _new_service() -> ElectionService:
    return ElectionService(observers=[log_observer])


# In-memory election state
_STATE: Dict[str, Any] = {"service": _new_service()}


TEMPLATE = """
<!DOCTYPE html>
<html>
<head><title>Election Results</title></head>
<body>
<h1>Election Results</h1>
{% if rows %}
<table>
<tr><th>Candidate</th><th>Affiliation</th><th>Votes</th></tr>
{% for row in rows %}
<tr><td>{{ row.candidate_name }}</td><td>{{ row.affiliation }}</td><td>{{ row.obfuscated_tally }}</td></tr>
{% endfor %}
</table>
{% else %}
<p>No candidates registered.</p>
{% endif %}
</body>
</html>
"""


def _service() -> ElectionService:
    return _STATE["service"]


def _strings(data: Dict[str, Any], *keys: str):
    values = [data.get(k) for k in keys]
    if not all(isinstance(v, str) for v in values):
        return None
    return values


@app.route("/init", methods=["POST"])
def init_election():
    """Throw away all voters, candidates and votes."""
    _STATE["service"] = _new_service()
    return jsonify({"status": "initialized"})


@app.route("/voters", methods=["POST"])
def register_voter():
    data = request.get_json(silent=True) or {}
    fields = _strings(data, "name", "credential")
    if fields is None:
        return jsonify({"error": "missing or invalid fields"}), 400
    name, credential = fields
    try:
        _service().register_voter(name, credential)
    except DuplicateRegistrationError as e:
        return jsonify({"error": str(e)}), 409
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"status": "registered", "name": name}), 201


@app.route("/voters/<name>", methods=["GET"])
def get_voter(name: str):
    voter = _service().get_voter(name)
    if voter is None:
        return jsonify({"error": "voter not found"}), 404
    return jsonify({"name": voter.name, "has_voted": voter.has_voted})


@app.route("/candidates", methods=["POST"])
def add_candidate():
    data = request.get_json(silent=True) or {}
    fields = _strings(data, "name", "affiliation")
    if fields is None:
        return jsonify({"error": "missing or invalid fields"}), 400
    name, affiliation = fields
    try:
        _service().add_candidate(name, affiliation)
    except DuplicateRegistrationError as e:
        return jsonify({"error": str(e)}), 409
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"status": "added", "name": name}), 201


@app.route("/candidates/<name>", methods=["GET"])
def get_candidate(name: str):
    candidate = _service().get_candidate(name)
    if candidate is None:
        return jsonify({"error": "candidate not found"}), 404
    return jsonify({"name": candidate.name, "affiliation": candidate.affiliation})


@app.route("/cast", methods=["POST"])
def cast_vote():
    """Cast a vote on behalf of the voter named in the request."""
    data = request.get_json(silent=True) or {}
    fields = _strings(data, "voter", "credential", "candidate")
    if fields is None:
        return jsonify({"error": "missing or invalid fields"}), 400
    voter_name, credential, candidate_name = fields
    service = _service()
    candidate = service.get_candidate(candidate_name)
    if service.get_voter(voter_name) is None or candidate is None:
        return jsonify({"error": "Invalid voter or candidate."}), 404
    if not service.cast_vote(Voter(voter_name, credential), candidate):
        return jsonify({"error": "Authentication failed or voter has already voted."}), 403
    return jsonify({"status": "cast", "candidate": candidate.name}), 201


@app.route("/results", methods=["GET"])
def get_results():
    rows = _service().get_results()
    return jsonify({"results": [row.to_dict() for row in rows]})


@app.route("/", methods=["GET"])
def index():
    return render_template_string(TEMPLATE, rows=_service().get_results())


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app.run(host=config.HOST, port=config.PORT)
