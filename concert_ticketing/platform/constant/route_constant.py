# Auth
AUTH_REGISTER = '/auth/register'
AUTH_LOGIN = '/auth/login'
AUTH_ME = '/auth/me'

# Catalogue
CONCERT_BASE = '/concerts'
TICKET_BASE = '/tickets'

# Orders
ORDER_BASE = '/orders'
ORDER_GET = '/orders/{order_id}'

# Ops
HEALTH = '/health'
METRICS = '/metrics'
