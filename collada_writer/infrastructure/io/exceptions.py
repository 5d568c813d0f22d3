class ColladaInfrastructureError(Exception):
    pass


class StreamStateError(ColladaInfrastructureError):
    pass


class SceneSourceError(ColladaInfrastructureError):
    pass


class SceneSourceNotFoundError(SceneSourceError):
    pass


class SceneParseError(SceneSourceError):
    pass
