"""
The three API scenarios. Each one builds its own requests against the base
URL it is given, so the live suite and the stub-backed tests run the same code.
"""
from typing import Any, Dict, Tuple

import payloads
from api_helpers import PETSTORE_BASE_URL, REQRES_API_KEY, REQRES_BASE_URL, make_request
from assertions import assert_contains, assert_equals, assert_non_empty_string, assert_status
from json_path import get_path
from logging_helper import log_response, log_status

JSON_HEADERS = {"Content-Type": "application/json"}


def create_pet(base_url: str = PETSTORE_BASE_URL) -> Dict[str, Any]:
    response = make_request(
        "POST",
        "/pet",
        base_url=base_url,
        headers=JSON_HEADERS,
        body=payloads.CREATE_PET_BODY,
    )
    log_response(response)

    assert_status(response, 200)
    name = get_path(response.data, "name")
    assert_equals(name, payloads.PET_NAME, "Created pet name does not match the request")

    log_status("good", "Pet Created: ", name)
    return response.data


def get_available_pets(base_url: str = PETSTORE_BASE_URL) -> Tuple[Any, Any]:
    response = make_request(
        "GET",
        "/pet/findByStatus",
        base_url=base_url,
        params={"status": "available"},
    )
    assert_status(response, 200)

    # Read, not asserted: listing content on the demo service changes constantly.
    pet_name = get_path(response.data, "[1].name")
    pet_status = get_path(response.data, "[1].status")

    log_status("info", "Pet Name: ", str(pet_name))
    log_status("info", "Pet Status ", str(pet_status))
    return pet_name, pet_status


def reqres_login(
    base_url: str = REQRES_BASE_URL,
    email: str = payloads.LOGIN_EMAIL,
    password: str = payloads.LOGIN_PASSWORD,
) -> Dict[str, Any]:
    # Step 1: login for a token
    login = make_request(
        "POST",
        "/api/login",
        base_url=base_url,
        headers={**JSON_HEADERS, "x-api-key": REQRES_API_KEY},
        body=payloads.login_body(email, password),
    )
    assert_status(login, 200)
    token = get_path(login.data, "token")
    assert_non_empty_string(token, "Login response carried no usable token")
    log_status("good", "Token: ", str(token))

    # Step 2: fetch a user with the bearer token
    user = make_request(
        "GET",
        "/api/users/2",
        base_url=base_url,
        headers={"x-api-key": REQRES_API_KEY, "Authorization": f"Bearer {token}"},
    )
    log_response(user)
    assert_status(user, 200)
    assert_equals(get_path(user.data, "data.id"), 2)
    assert_contains(get_path(user.data, "data.email"), "@reqres.in")
    return user.data
