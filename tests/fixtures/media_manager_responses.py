"""
Reponses simulees de l'API Media Manager pour les tests.

Structures reduites au strict necessaire, au format JSON:API de l'API.
"""

BASE_URL = "https://mm.test/api/v1"

SHOW_ID = "adams-chronicles"
SEASON_ID = "5c4d3f63-4e2b-4b9c-9d3e-6c1b2e7a8f90"
SPECIAL_ID = "a1f0c2d4-7b8e-4f3a-9c6d-2e5b8a1f0c3d"

SHOW_RESPONSE = {
    "data": {
        "type": "show",
        "id": SHOW_ID,
        "attributes": {
            "title": "The Adams Chronicles",
            "slug": "adams-chronicles",
        },
    },
}

SEASONS_RESPONSE = {
    "data": [
        {"type": "season", "id": SEASON_ID, "attributes": {"ordinal": 1}},
    ],
    "links": {"next": None, "prev": None},
}

BAD_REQUEST_MESSAGE = "Failure message from the server"
