def build_target_resolver(*args: object, **kwargs: object):
    from buildmeta.resolvers.factory import build_target_resolver as _build_target_resolver

    return _build_target_resolver(*args, **kwargs)


__all__ = ["build_target_resolver"]
