import logging

from core.navigation import Navigator
from utilities.root import RootNode

logger = logging.getLogger(__name__)


def main_loop():
    navigator = Navigator()
    navigator.init(RootNode())

    while True:
        try:
            navigator.process()
        except (KeyboardInterrupt, EOFError):
            break
        except Exception:
            logger.exception("Unhandled error in %s", navigator.bread_crumbs())
            if navigator.current is not None:
                navigator.current.wait_back()

    print('bye')
