"""
Stream service components
Each component mounts its blueprint through `mount_component`, which records
it on the app so health reporting lists what is actually served.
"""
COMPONENTS_EXTENSION = 'sse_demo.components'


def mount_component(app, name, blueprint):
    """Register a component blueprint and record it as mounted on the app"""
    app.register_blueprint(blueprint)
    app.extensions.setdefault(COMPONENTS_EXTENSION, {})[name] = blueprint.name
    return blueprint


def mounted_components(app):
    """Names of the components mounted on the app"""
    return sorted(app.extensions.get(COMPONENTS_EXTENSION, {}))


__all__ = ['mount_component', 'mounted_components', 'COMPONENTS_EXTENSION']
