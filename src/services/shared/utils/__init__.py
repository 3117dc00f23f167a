from .http_response import api_response as api_response
from .http_response import domain_error_response as domain_error_response
from .http_response import error_response as error_response
