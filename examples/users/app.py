"""Users — a small routing table in the treeroute style.

Demonstrates static routes, required and optional parameters, methods
sharing a pattern, and the decorator form of ``add_route``.

Run:
    python app.py /user/7
"""

import sys

from treeroute import Router

router = Router()

router.add_route("get", "/", "home")
router.add_route("get", "/user", "user-list")
router.add_route("get", "/user/{id}", "user-detail")
router.add_route("post", "/user/{id}", "user-update")
router.add_route("get", "/user/{id}/edit", "user-edit")
router.add_route("any", "/archive/{year}/{month?}", "archive")


@router.route("get", "/about")
def about():
    return "About treeroute"


if __name__ == "__main__":
    match = router.find_route("get", sys.argv[1] if len(sys.argv) > 1 else "/")
    print(match)
