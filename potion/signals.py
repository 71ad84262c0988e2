from blinker import Namespace

_potion = Namespace()

request_started = _potion.signal('request-started')

request_finished = _potion.signal('request-finished')
