import json

PET_NAME = "Sumerge pets"

LOGIN_EMAIL = "eve.holt@reqres.in"
LOGIN_PASSWORD = "cityslicka"

# Body for POST /pet, kept as the literal document the service is sent.
CREATE_PET_BODY = """
{
  "id": 0,
  "category": {
    "id": 0,
    "name": "string"
  },
  "name": "Sumerge pets",
  "photoUrls": [
    "string"
  ],
  "tags": [
    {
      "id": 0,
      "name": "string"
    }
  ],
  "status": "available"
}
"""


def build_pet(pet_id=0, name=PET_NAME, status="available", category=None, photo_urls=None, tags=None):
    """
    Builds a Pet document. With no arguments the result equals
    json.loads(CREATE_PET_BODY).
    """
    return {
        "id": pet_id,
        "category": category if category is not None else {"id": 0, "name": "string"},
        "name": name,
        "photoUrls": list(photo_urls) if photo_urls is not None else ["string"],
        "tags": list(tags) if tags is not None else [{"id": 0, "name": "string"}],
        "status": status,
    }


def login_body(email=LOGIN_EMAIL, password=LOGIN_PASSWORD):
    return json.dumps({"email": email, "password": password})
