"""
WSGI config for ActivationCodeService project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ActivationCodeService.settings.dev")

application = get_wsgi_application()
