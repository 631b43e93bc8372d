class WebConfigResources:
    """Encapsulates the naming scheme used for the web config objects of a
    monitored process."""

    @classmethod
    def secret_name(self, name: str):
        """Returns the name of the Secret holding the rendered web config."""
        return f"{name}-web-config"

    @classmethod
    def volume_name(self):
        """Returns the name of the volume exposing the web config Secret."""
        return "web-config"

    @classmethod
    def config_file_key(self):
        """Returns the key of the rendered web config inside its Secret."""
        return "web-config.yaml"
