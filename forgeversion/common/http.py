from ..model import TransportError


def get_response(sess, url):
    r = sess.get(url)
    if not r.ok:
        raise TransportError(r.status_code, url)
    return r


def get_text(sess, url) -> str:
    return get_response(sess, url).text


def get_json(sess, url):
    return get_response(sess, url).json()
