import json
import logging
import math
import re

from flask import Blueprint, abort, current_app, jsonify, request
from werkzeug.routing import PathConverter

from ..responses import text_response

logger = logging.getLogger(__name__)

products_bp = Blueprint("products", __name__)

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ProductPathConverter(PathConverter):
    """Like path, but also matches nothing, so /products/ reaches the id views."""

    regex = ".*?"
    part_isolating = False


# ----------------------------
# Helper
# ----------------------------
def get_store():
    return current_app.extensions["product_store"]


def parse_product_id(product_path):
    """
    Reads the id from the path after /products/.

    Only the first segment counts and only its leading integer
    ("12abc" -> 12). Without one the id is nan, which matches no product.
    """
    segment = product_path.split("/")[0]
    match = LEADING_INT.match(segment)
    if not match:
        return math.nan
    return int(match.group(1))


def format_product_id(product_id):
    if isinstance(product_id, float) and math.isnan(product_id):
        return "NaN"
    return str(product_id)


def find_index(products, product_id):
    for index, product in enumerate(products):
        if not isinstance(product, dict):
            continue
        pid = product.get("id")
        if isinstance(pid, bool) or not isinstance(pid, (int, float)):
            continue
        if pid == product_id:
            return index
    return None


def reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def read_json_object():
    data = json.loads(request.get_data(as_text=True), parse_constant=reject_constant)
    if not isinstance(data, dict):
        raise ValueError(f"Request body must be a JSON object, got {type(data).__name__}")
    return data


def product_not_found(product_id):
    return text_response(f"Product with ID {format_product_id(product_id)} not found", 404)


@products_bp.before_request
def only_plain_routes():
    # HEAD is answered like any other unknown method, and the collection
    # route only matches without a query string
    if request.method == "HEAD":
        abort(404)
    if request.url_rule.rule == "/products" and request.query_string:
        abort(404)


# ----------------------------
# List products
# ----------------------------
@products_bp.route("/products", methods=["GET"], provide_automatic_options=False)
def list_products():
    return jsonify(get_store().load())


# ----------------------------
# Product detail
# ----------------------------
@products_bp.route("/products/<product_path:product_path>", methods=["GET"], provide_automatic_options=False)
def get_product(product_path):
    product_id = parse_product_id(product_path)
    products = get_store().load()

    index = find_index(products, product_id)
    if index is None:
        return product_not_found(product_id)
    return jsonify(products[index])


# ----------------------------
# Create product
# ----------------------------
@products_bp.route("/products", methods=["POST"], provide_automatic_options=False)
def create_product():
    product = read_json_object()
    store = get_store()

    with store.lock:
        products = store.load()
        product["id"] = len(products) + 1
        products.append(product)
        store.save(products)

    logger.info(f"Product {product['id']} created")
    return jsonify(product), 201


# ----------------------------
# Replace product
# ----------------------------
@products_bp.route("/products/<product_path:product_path>", methods=["PUT"], provide_automatic_options=False)
def replace_product(product_path):
    product_id = parse_product_id(product_path)
    body = read_json_object()
    store = get_store()

    with store.lock:
        products = store.load()
        index = find_index(products, product_id)
        if index is None:
            logger.warning(f"PUT on missing product {format_product_id(product_id)}")
            return product_not_found(product_id)

        product = {**body, "id": product_id}
        products[index] = product
        store.save(products)

    logger.info(f"Product {product_id} replaced")
    return jsonify(product)


# ----------------------------
# Partial update
# ----------------------------
@products_bp.route("/products/<product_path:product_path>", methods=["PATCH"], provide_automatic_options=False)
def patch_product(product_path):
    product_id = parse_product_id(product_path)
    fields = read_json_object()
    store = get_store()

    with store.lock:
        products = store.load()
        index = find_index(products, product_id)
        if index is None:
            logger.warning(f"PATCH on missing product {format_product_id(product_id)}")
            return product_not_found(product_id)

        product = {**products[index], **fields}
        products[index] = product
        store.save(products)

    logger.info(f"Product {product_id} updated: {', '.join(fields) or 'no fields'}")
    return jsonify(product)


# ----------------------------
# Delete product
# ----------------------------
@products_bp.route("/products/<product_path:product_path>", methods=["DELETE"], provide_automatic_options=False)
def delete_product(product_path):
    product_id = parse_product_id(product_path)
    store = get_store()

    with store.lock:
        products = store.load()
        index = find_index(products, product_id)
        if index is None:
            logger.warning(f"DELETE on missing product {format_product_id(product_id)}")
            return product_not_found(product_id)

        del products[index]
        store.save(products)

    logger.info(f"Product {product_id} deleted")
    return text_response(f"Product with ID {product_id} deleted successfully", 200)
