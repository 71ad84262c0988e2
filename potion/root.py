"""
Relations of the API root. These endpoints are known in advance, so they are shipped with the client as JSON
hyper-schema links rather than discovered from a response.
"""

ROOT_LINKS = [
    {"rel": "current_user", "href": "/user", "method": "GET"},
    {"rel": "current_user", "href": "/user", "method": "PATCH"},
    {"rel": "user", "href": "/users/{user}", "method": "GET"},
    {"rel": "user_organizations", "href": "/user/orgs", "method": "GET"},
    {"rel": "organization", "href": "/orgs/{org}", "method": "GET"},
    {"rel": "organization", "href": "/orgs/{org}", "method": "PATCH"},
    {"rel": "team", "href": "/teams/{team_id}", "method": "GET"},
    {"rel": "team", "href": "/teams/{team_id}", "method": "PATCH"},
    {"rel": "team", "href": "/teams/{team_id}", "method": "DELETE"},
    {"rel": "repository", "href": "/repos/{owner}/{repo}", "method": "GET"},
    {"rel": "repository", "href": "/repos/{owner}/{repo}", "method": "PATCH"},
    {"rel": "repository", "href": "/repos/{owner}/{repo}", "method": "DELETE"},
]
