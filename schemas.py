named_ref = {
    "type": "object",
    "required": ["id", "name"],
    "properties": {
        "id": {
            "type": "integer"
        },
        "name": {
            "type": "string"
        }
    }
}

pet = {
    "type": "object",
    "required": ["id", "category", "name", "photoUrls", "tags", "status"],
    "properties": {
        "id": {
            "type": "integer"
        },
        "category": named_ref,
        "name": {
            "type": "string"
        },
        "photoUrls": {
            "type": "array",
            "items": {"type": "string"}
        },
        "tags": {
            "type": "array",
            "items": named_ref
        },
        "status": {
            "type": "string",
            "enum": ["available", "pending", "sold"]
        }
    }
}

pet_list = {
    "type": "array",
    "items": pet
}


login_request = {
    "type": "object",
    "required": ["email", "password"],
    "additionalProperties": False,
    "properties": {
        "email": {
            "type": "string"
        },
        "password": {
            "type": "string"
        }
    }
}

login_response = {
    "type": "object",
    "required": ["token"],
    "properties": {
        "token": {
            "type": "string",
            "minLength": 1
        }
    }
}


user = {
    "type": "object",
    "required": ["data"],
    "properties": {
        "data": {
            "type": "object",
            "required": ["id", "email", "first_name", "last_name", "avatar"],
            "properties": {
                "id": {
                    "type": "integer"
                },
                "email": {
                    "type": "string",
                    "pattern": "@reqres\\.in$"
                },
                "first_name": {
                    "type": "string"
                },
                "last_name": {
                    "type": "string"
                },
                "avatar": {
                    "type": "string"
                }
            }
        }
    }
}
