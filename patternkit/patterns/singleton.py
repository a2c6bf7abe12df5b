class Singleton:
    """
    Eagerly created single instance.

    The instance is built when this module is imported. Calling the class
    again hands back that same object.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Singleton, cls).__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "Singleton":
        return cls._instance


# Eager load
Singleton()
