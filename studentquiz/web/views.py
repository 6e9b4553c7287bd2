"""Ajax entry point of web services.

Requests are JSON lists of calls::

    [{"index": 0, "methodname": "mod_studentquiz_edit_comment", "args": {...}}]

Responses are JSON lists of results, in the same order. Execution stops at
the first failing call.
"""
import logging
from typing import Any, Dict, List

from flask import Blueprint, jsonify, request
from flask.views import MethodView
from werkzeug.exceptions import BadRequest

from studentquiz.exceptions import InvalidSesskeyException
from studentquiz.external.services import call_external_function

from .csrf import require_sesskey
from .http import nocache

logger = logging.getLogger(__name__)

bp = Blueprint("service", __name__, url_prefix="/service")


class AjaxServiceView(MethodView):
    decorators = [nocache]

    def get_calls(self) -> List[Dict[str, Any]]:
        calls = request.get_json(silent=True)
        if not isinstance(calls, list):
            raise BadRequest("Expected a JSON list of calls")

        for call in calls:
            if not isinstance(call, dict) or not isinstance(call.get("methodname"), str):
                raise BadRequest("Each call needs a 'methodname'")
            if not isinstance(call.get("args", {}), dict):
                raise BadRequest("Call 'args' must be an object")
        return calls

    def post(self):
        calls = self.get_calls()

        try:
            require_sesskey()
        except InvalidSesskeyException as e:
            return jsonify([{"error": True, "exception": e.to_dict()} for _ in calls])

        responses = []
        for call in calls:
            response = call_external_function(call["methodname"], call.get("args") or {})
            responses.append(response)
            if response["error"]:
                # Do not process the remaining requests.
                break

        return jsonify(responses)


ajax_view = AjaxServiceView.as_view("ajax")
bp.add_url_rule("/ajax", view_func=ajax_view, methods=["POST"])
