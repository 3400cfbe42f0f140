from flask_restx import fields

class Models:
    def __init__(self, api, PET_STATUS):
        self.api = api

        self.category_model = api.model('Category', {
            'id': fields.Integer(description='The category ID'),
            'name': fields.String(description='The category name'),
        })

        self.tag_model = api.model('Tag', {
            'id': fields.Integer(description='The tag ID'),
            'name': fields.String(description='The tag name'),
        })

        self.pet_model = api.model('Pet', {
            'id': fields.Integer(description='The pet ID (0 lets the server assign one)'),
            'category': fields.Nested(self.category_model),
            'name': fields.String(required=True, description='The pet name'),
            'photoUrls': fields.List(fields.String, required=True, description='Photo URLs'),
            'tags': fields.List(fields.Nested(self.tag_model)),
            'status': fields.String(description='The pet status', enum=PET_STATUS),
        })

        self.login_model = api.model('Login', {
            'email': fields.String(required=True, description='Account email'),
            'password': fields.String(description='Account password'),
        })

        self.token_model = api.model('Token', {
            'token': fields.String(description='Opaque bearer token'),
        })

        self.user_model = api.model('User', {
            'id': fields.Integer(description='The user ID'),
            'email': fields.String(description='The user email'),
            'first_name': fields.String(description='First name'),
            'last_name': fields.String(description='Last name'),
            'avatar': fields.String(description='Avatar image URL'),
        })

        self.user_envelope_model = api.model('UserEnvelope', {
            'data': fields.Nested(self.user_model),
        })
