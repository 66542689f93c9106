from flask import Response


def text_response(body, status):
    return Response(body, status=status, mimetype="text/plain")
