class ServiceError(str):
    """Error message returned by a service, tagged with its HTTP status.

    Plain strings (engine validation messages) map to 400.
    """

    status = 400


class NotFound(ServiceError):
    status = 404


class Conflict(ServiceError):
    status = 409
