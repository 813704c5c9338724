"""Request-scoped dependencies shared by the HTTP routers."""

from fastapi import Request

from beacon import BeaconServer


def get_server(request: Request) -> BeaconServer:
    """Return the Beacon server attached to the running application."""
    return request.app.state.beacon
