"""
main.py — Algorithm Step Visualizer Flask App
===============================================
JSON API over the operation registry and the recording engine.  A front
end posts a container and an operation, gets back the complete step
sequence plus a container snapshot per step, and plays it locally.

Routes:
  GET  /                       – service description
  GET  /api/operations         – registry listing (?family= filter)
  POST /api/data/generate      – random seed data (array or graph)
  POST /api/run                – run one operation to completion
  POST /api/compare            – run two operations on the same array

State management:
  None.  Every request carries its own container; nothing is kept between
  requests.
"""

import dataclasses
import logging
import math
from typing import Any, Optional

from flask import Flask, jsonify, request

import config
from algorithms import (
    GRAPH, HASH_TABLE, LINKED_LIST, LIST, TREE,
    OperationInfo, families, get_operation, list_operations, operations_by_family,
)
from algorithms.step import StepStream
from algorithms.trees import bst_ops, binary_tree_ops, hash_table_ops
from engine import Recorder, compare
from structures import BinaryTree, Graph, HashTable, LinkedList
from structures.datagen import ARRAY_PRESETS, random_graph
from structures.errors import InvalidContainerError, VisualizerError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Container builders — JSON payload → live container
# ---------------------------------------------------------------------------
def _numbers(data: Any, max_items: int) -> list:
    if not isinstance(data, list):
        raise InvalidContainerError("expected a list of numbers")
    if len(data) > max_items:
        raise InvalidContainerError(f"container too large: {len(data)} items (max {max_items})")
    for v in data:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise InvalidContainerError(f"not a number: {v!r}")
    return list(data)


def build_container(info: OperationInfo, data: Any, max_items: int = 200) -> Any:
    """Turn the request's container JSON into the container `info` operates on."""
    try:
        return _build(info, data, max_items)
    except (KeyError, TypeError) as e:
        raise InvalidContainerError(f"malformed {info.container} container: {e}") from e


def _build(info: OperationInfo, data: Any, max_items: int) -> Any:
    if info.container == LIST:
        return _numbers(data, max_items)

    if info.container == LINKED_LIST:
        if isinstance(data, list):
            return LinkedList.from_values(_numbers(data, max_items))
        if isinstance(data, dict):
            if "values" in data:
                return LinkedList.from_values(_numbers(data["values"], max_items))
            return LinkedList.from_dict(data)

    if info.container == TREE:
        values = data if isinstance(data, list) else data.get("values") if isinstance(data, dict) else None
        if values is not None:
            return _tree_from_values(info.family, _numbers(values, max_items))
        if isinstance(data, dict):
            return BinaryTree.from_dict(data)

    if info.container == HASH_TABLE and isinstance(data, dict):
        if "table" in data:
            return HashTable.from_dict(data)
        table = HashTable(capacity=int(data.get("capacity", config.DEFAULT_HASH_CAPACITY)))
        for entry in data.get("entries", []):
            key, value = entry
            steps = StepStream(hash_table_ops.insert(table, int(key), value)).drain()
            if steps[-1].rejected:
                raise InvalidContainerError(f"cannot load entry {key}: {steps[-1].message}")
        return table

    if info.container == GRAPH and isinstance(data, dict):
        if "adjacency" in data:
            return Graph.from_adjacency_list(
                data["adjacency"],
                directed=bool(data.get("directed", False)),
                weighted=bool(data.get("weighted", False)),
            )
        if len(data.get("nodes", [])) > max_items:
            raise InvalidContainerError(f"graph too large (max {max_items} nodes)")
        return Graph.from_dict(data)

    raise InvalidContainerError(f"cannot build a {info.container} container from {type(data).__name__}")


def _tree_from_values(family: str, values: list) -> BinaryTree:
    """BST family builds by BST insertion (duplicates skipped), others level by level."""
    tree = BinaryTree()
    insert = bst_ops.insert if family == "bst" else binary_tree_ops.insert
    for v in values:
        StepStream(insert(tree, v)).drain()
    return tree


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------
def to_json(obj: Any) -> Any:
    """Dataclasses → dicts, ±inf → None (JSON has no infinity)."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return to_json(dataclasses.asdict(obj))
    if isinstance(obj, float) and math.isinf(obj):
        return None
    if isinstance(obj, dict):
        return {k: to_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_json(v) for v in obj]
    return obj


def _payload() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidContainerError("request body must be a JSON object")
    return data


def _record(key: str, container: Any, operands: dict) -> Recorder:
    rec = Recorder()
    rec.start(key, container, **operands)
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(app_config: Optional[config.AppConfig] = None) -> Flask:
    app_config = app_config or config.AppConfig.from_env()

    app = Flask(__name__)
    app.secret_key = app_config.secret_key
    app.config["DEBUG"] = app_config.debug
    app.config["MAX_ITEMS"] = app_config.max_items

    # -----------------------------------------------------------------------
    # Errors → 400 JSON
    # -----------------------------------------------------------------------
    @app.errorhandler(VisualizerError)
    def handle_visualizer_error(err):
        logger.warning("rejected request to %s: %s", request.path, err)
        return jsonify({"error": str(err)}), 400

    @app.errorhandler(ValueError)
    def handle_value_error(err):
        logger.warning("bad value in request to %s: %s", request.path, err)
        return jsonify({"error": str(err)}), 400

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        return jsonify({
            "name":      "Algorithm Step Visualizer",
            "families":  families(),
            "endpoints": ["/api/operations", "/api/data/generate", "/api/run", "/api/compare"],
        })

    @app.route("/api/operations")
    def api_operations():
        family = request.args.get("family")
        ops = operations_by_family(family) if family else list_operations()
        return jsonify({"operations": [op.to_dict() for op in ops]})

    @app.route("/api/data/generate", methods=["POST"])
    def api_data_generate():
        data = _payload()
        kind = data.get("kind", "array")

        if kind == "array":
            preset = data.get("preset", "random")
            if preset not in ARRAY_PRESETS:
                raise InvalidContainerError(f"unknown array preset: {preset}")
            size = int(data.get("size", config.DEFAULT_ARRAY_SIZE))
            if not 0 <= size <= app.config["MAX_ITEMS"]:
                raise InvalidContainerError(f"size must be between 0 and {app.config['MAX_ITEMS']}")
            return jsonify({"array": ARRAY_PRESETS[preset](size=size, seed=data.get("seed"))})

        if kind == "graph":
            num_nodes = int(data.get("nodes", 8))
            if not 0 <= num_nodes <= app.config["MAX_ITEMS"]:
                raise InvalidContainerError(f"nodes must be between 0 and {app.config['MAX_ITEMS']}")
            g = random_graph(
                num_nodes=num_nodes,
                edge_probability=float(data.get("prob", 0.3)),
                directed=bool(data.get("directed", False)),
                weighted=bool(data.get("weighted", True)),
                seed=data.get("seed"),
            )
            return jsonify({"graph": g.to_dict()})

        raise InvalidContainerError(f"unknown data kind: {kind}")

    @app.route("/api/run", methods=["POST"])
    def api_run():
        data = _payload()
        info = get_operation(str(data.get("operation", "")))
        container = build_container(info, data.get("container"), app.config["MAX_ITEMS"])
        operands = data.get("operands") or {}
        if not isinstance(operands, dict):
            raise InvalidContainerError("operands must be a JSON object")
        try:
            rec = _record(info.key, container, operands)
        except TypeError as e:
            raise InvalidContainerError(f"bad operands for {info.key}: {e}") from e
        return jsonify(to_json(rec.export()))

    @app.route("/api/compare", methods=["POST"])
    def api_compare():
        data = _payload()
        left, right = get_operation(str(data.get("left", ""))), get_operation(str(data.get("right", "")))
        for info in (left, right):
            if info.container != LIST or info.operands:
                raise InvalidContainerError(f"{info.key} cannot be compared on a plain array")
        values = _numbers(data.get("values"), app.config["MAX_ITEMS"])

        rec_left  = _record(left.key, list(values), {})
        rec_right = _record(right.key, list(values), {})
        return jsonify({
            "comparison": to_json(compare(rec_left, rec_right)),
            "left":       to_json(rec_left.export()),
            "right":      to_json(rec_right.export()),
        })

    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app_config = config.AppConfig.from_env()
    logger.info("Algorithm Step Visualizer listening on http://localhost:5000")
    create_app(app_config).run(debug=app_config.debug, host="0.0.0.0", port=5000)
