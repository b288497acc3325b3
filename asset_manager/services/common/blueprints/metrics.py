from flask import Blueprint, Response, request
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

metrics_blueprint = Blueprint("metrics_view", __name__)


@metrics_blueprint.route("/metrics", methods=["GET"])
def metrics_route():
    """Prometheus metrics of the HTTP endpoints and the asset lifecycle.

    Like Prometheus' own exporters, the output may be restricted to some
    series by passing their names as ``name[]`` query parameters.
    ---
    parameters:
      - name: "name[]"
        in: query
        type: array
        items: {type: string}
        collectionFormat: multi
    responses:
      200:
        description: "Metrics in the Prometheus text format."
    """
    registry = REGISTRY
    names = request.args.getlist("name[]")
    if names:
        registry = REGISTRY.restricted_registry(names)
    return Response(generate_latest(registry), mimetype=CONTENT_TYPE_LATEST)
