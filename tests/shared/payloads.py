from __future__ import annotations

CERTIFICATION_US = {
    "certifications": {
        "US": [{"certification": "R", "meaning": "Restricted", "order": 1}],
    }
}

INVALID_API_KEY = {"status_code": 7, "status_message": "Invalid API key"}

RESOURCE_NOT_FOUND = {"status_code": 34, "status_message": "Resource not found"}

EMPTY_QUERY = {"errors": ["query: cannot be empty"]}

EMPTY_PAGE = {"page": 1, "results": [], "total_pages": 0, "total_results": 0}
