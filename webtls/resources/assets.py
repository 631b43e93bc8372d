import posixpath
from webtls.types.models.selector import CredentialSelector


def asset_key(selector: CredentialSelector, namespace: str = "") -> str:
    """Return the file name under which a credential is mounted.

    The name is `<kind>_<namespace>_<name>_<key>`. The kind always comes
    first so Secret and ConfigMap credentials never share a name. An unset
    selector has no file name and yields an empty string.
    """
    if not selector.is_set:
        return ""
    return f"{selector.kind.value}_{namespace}_{selector.name}_{selector.key}"


def resolve(selector: CredentialSelector, mount_prefix: str) -> str:
    """Return the path of a credential below `mount_prefix`.

    An unset selector resolves to an empty string.
    """
    if not selector.is_set:
        return ""
    path = posixpath.normpath(posixpath.join(mount_prefix, asset_key(selector)))
    # normpath keeps a leading "//" as POSIX allows, collapse it to one slash
    if path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path
