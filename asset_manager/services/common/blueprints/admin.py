from flask import Blueprint, Response

admin_blueprint = Blueprint("admin_view", __name__)


@admin_blueprint.route("/status")
def status_view() -> Response:
    """Liveness probe.
    ---
    get:
      responses:
        200:
          description: "The service is up and responding."
    """
    return Response(status=200)
