from firebase_functions import https_fn
from firebase_functions.https_fn import Request
import logging

from redirect_page import build_deep_link, render_redirect_page


class MissingTokenError(ValueError):
    """Raised when a request carries no usable share token."""


def get_share_token(req: Request) -> str:
    token = req.args.get("token")
    # ?token= counts as missing too
    if not token:
        raise MissingTokenError("Missing token")
    return token


@https_fn.on_request()
def share_redirect(req: Request) -> https_fn.Response:
    """
    Turns ?token=<share token> into a page that opens the app
    via its deep link, with a fallback button if nothing happens.
    """
    try:
        try:
            token = get_share_token(req)
        except MissingTokenError as e:
            logging.warning("share_redirect called without token: %s", req.full_path)
            return https_fn.Response(str(e), status=400, content_type="text/plain; charset=utf-8")

        deep_link = build_deep_link(token)
        html = render_redirect_page(deep_link)

        # never log the token itself
        logging.info("Serving share redirect page (token length %d)", len(token))
        return https_fn.Response(
            html,
            status=200,
            headers={"Access-Control-Allow-Origin": "*"},
            content_type="text/html; charset=utf-8",
        )

    except Exception:
        logging.exception("Error during share_redirect")
        raise
