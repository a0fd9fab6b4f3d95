# API Route Constants

# Base API
API_BASE = '/api'

# Event registry routes
EVENT_BASE = f'{API_BASE}/event'
EVENT_CREATE = EVENT_BASE
EVENT_LIST = EVENT_BASE
EVENT_COUNT = f'{EVENT_BASE}/count'
EVENT_MY_TICKETS = f'{EVENT_BASE}/my_tickets'
EVENT_NOTIFICATIONS_SSE = f'{EVENT_BASE}/notifications/sse'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_PURCHASE = f'{EVENT_BASE}/{{event_id}}/purchase'
EVENT_CANCEL = f'{EVENT_BASE}/{{event_id}}/cancel'

# Ticket ledger routes
TICKET_BASE = f'{API_BASE}/ticket'
TICKET_BALANCE = f'{TICKET_BASE}/balance'
TICKET_MINTER = f'{TICKET_BASE}/minter'
TICKET_BY_OWNER = f'{TICKET_BASE}/owner/{{owner}}'
TICKET_GET = f'{TICKET_BASE}/{{token_id}}'
TICKET_TRANSFER = f'{TICKET_BASE}/{{token_id}}/transfer'

# System routes
HEALTH = '/health'
METRICS = '/metrics'
