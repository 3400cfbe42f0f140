"""
Local stand-in for petstore.swagger.io/v2 and reqres.in.

Serves the four endpoints the scenarios call, records every request it
receives, and lets a test replace any route's response:

    app = create_app()
    app.config["OVERRIDES"][("POST", "/v2/pet")] = (500, {"message": "boom"})
    app.config["OVERRIDES"][("POST", "/v2/pet")] = (200, "<html>maintenance</html>")
    ...
    app.config["RECORDED"][-1]["body"], app.config["RECORDED"][-1]["response_body"]
"""
import itertools
import json

from flask import Flask, Response, current_app, g, jsonify, request
from flask_restx import Api, Namespace, Resource, marshal

from api_helpers import REQRES_API_KEY
from models import Models

PET_STATUS = ['available', 'pending', 'sold']

STUB_TOKEN = "QpwL5tke4Pnpja7X4"

SEED_PETS = [
    {"id": 101, "category": {"id": 1, "name": "Dogs"}, "name": "Rex",
     "photoUrls": ["string"], "tags": [], "status": "available"},
    {"id": 102, "category": {"id": 2, "name": "Cats"}, "name": "Tom",
     "photoUrls": ["string"], "tags": [{"id": 1, "name": "indoor"}], "status": "available"},
    {"id": 103, "category": {"id": 1, "name": "Dogs"}, "name": "Fido",
     "photoUrls": ["string"], "tags": [], "status": "sold"},
    {"id": 104, "category": {"id": 3, "name": "Birds"}, "name": "Tweety",
     "photoUrls": [], "tags": [], "status": "pending"},
]

ACCOUNTS = {
    "eve.holt@reqres.in": "cityslicka",
}

USERS = {
    2: {
        "id": 2,
        "email": "janet.weaver@reqres.in",
        "first_name": "Janet",
        "last_name": "Weaver",
        "avatar": "https://reqres.in/img/faces/2-image.jpg",
    },
}


def _record_request():
    g.record = {
        "method": request.method,
        "path": request.path,
        "query": request.query_string.decode("utf-8"),
        "url": request.url,
        "headers": {k.lower(): v for k, v in request.headers.items()},
        "body": request.get_data(as_text=True),
    }
    current_app.config["RECORDED"].append(g.record)


def _record_response(response):
    record = g.get("record")
    if record is not None:
        record["status"] = response.status_code
        record["response_body"] = response.get_data(as_text=True)
    return response


def _apply_override():
    override = current_app.config["OVERRIDES"].get((request.method, request.path))
    if override is None:
        return None
    status, body = override
    # str or bytes bodies go out verbatim, anything else as JSON
    if isinstance(body, (str, bytes)):
        return Response(body, status=status, mimetype="text/html")
    return jsonify(body), status


def _require_api_key():
    if request.headers.get("x-api-key") != REQRES_API_KEY:
        return {"error": "Missing API key"}, 401
    return None


def create_app():
    app = Flask(__name__)
    app.config["RECORDED"] = []
    app.config["OVERRIDES"] = {}
    app.config["PETS"] = [dict(p) for p in SEED_PETS]
    app.config["PET_IDS"] = itertools.count(9_223_372_000_000_000_001)

    api = Api(app, version='1.0', title='API suite stub',
              description='Recording stub of the pet store and reqres demo APIs', doc='/docs')
    models = Models(api, PET_STATUS)

    app.before_request(_record_request)
    app.before_request(_apply_override)
    app.after_request(_record_response)

    pet_ns = Namespace("pet", description="Pet store operations")
    reqres_ns = Namespace("api", description="reqres login and users")
    api.add_namespace(pet_ns, path="/v2/pet")
    api.add_namespace(reqres_ns, path="/api")

    @pet_ns.route('')
    class PetResource(Resource):
        @pet_ns.doc('add_pet')
        @pet_ns.expect(models.pet_model, validate=True)
        @pet_ns.marshal_with(models.pet_model)
        def post(self):
            """Add a pet; echoes it back with 200 like the demo service"""
            pet = dict(api.payload)
            if not pet.get("id"):
                pet["id"] = next(current_app.config["PET_IDS"])
            current_app.config["PETS"].append(pet)
            return pet, 200

    @pet_ns.route('/findByStatus')
    @pet_ns.param('status', 'The status of the pets to find')
    class PetFindByStatus(Resource):
        @pet_ns.doc('find_pets_by_status')
        @pet_ns.marshal_list_with(models.pet_model)
        def get(self):
            """Find pets by status"""
            statuses = request.args.getlist('status')
            if not statuses or any(s not in PET_STATUS for s in statuses):
                api.abort(400, f"Invalid pet status {statuses}")
            return [p for p in current_app.config["PETS"] if p.get("status") in statuses]

    @reqres_ns.route('/login')
    class Login(Resource):
        @reqres_ns.doc('login')
        @reqres_ns.expect(models.login_model)
        def post(self):
            """Exchange credentials for a token"""
            denied = _require_api_key()
            if denied:
                return denied

            try:
                payload = json.loads(request.get_data(as_text=True) or "{}")
            except ValueError:
                return {"error": "Invalid JSON body"}, 400

            email = payload.get("email")
            password = payload.get("password")
            if not email:
                return {"error": "Missing email or username"}, 400
            if not password:
                return {"error": "Missing password"}, 400
            if ACCOUNTS.get(email) != password:
                return {"error": "user not found"}, 400
            return marshal({"token": STUB_TOKEN}, models.token_model), 200

    @reqres_ns.route('/users/<int:user_id>')
    @reqres_ns.param('user_id', 'The user identifier')
    class User(Resource):
        @reqres_ns.doc('get_user')
        def get(self, user_id):
            """Fetch a single user"""
            denied = _require_api_key()
            if denied:
                return denied

            user = USERS.get(user_id)
            if user is None:
                return {}, 404
            return marshal({"data": user}, models.user_envelope_model), 200

    return app


if __name__ == '__main__':
    create_app().run(debug=True, port=5001)
