""" A broker that knows how to tell the browser about sign-in events when
    an account is used for Sync. It is a consumer of :class:`DuplexChannel`
    and the reference example of how application code uses one.
"""

from loguru import logger

from . import begin
from .protocol import fields


CAN_LINK_ACCOUNT = 'fxaccounts:can_link_account'
LOADED = 'loaded'
LOGIN = 'fxaccounts:login'

ALLOWED_FIELDS = (
    'email',
    'uid',
    'sessionToken',
    'sessionTokenContext',
    'unwrapBKey',
    'keyFetchToken',
    'customizeSync',
    'verified',
)


class UserCanceledLogin(Exception):
    """ The browser declined to link the account.
    """

    code = 'USER_CANCELED_LOGIN'
    errno = 1001

    def __init__(self, text='user canceled login'):
        Exception.__init__(self, text)


def _can_link(response):
    """ Return False only if the browser answered that the account cannot
        be linked. A dictionary under 'data' is the answer, and lacking an
        'ok' there counts as a no; otherwise a top-level 'ok' is consulted.
        Anything else is not an answer at all.
    """

    if not isinstance(response, dict):
        return True

    nested = response.get(fields.DATA)

    if isinstance(nested, dict):
        return bool(nested.get('ok'))

    if 'ok' in response:
        return bool(response['ok'])

    return True


class SyncWebChannelBroker:
    """ The *channel* may be provided for testing; otherwise one is built
        on *window* using the configured channel id.
    """

    def __init__(self, window=None, channel=None, config=None):

        if channel is None:
            channel = begin.channel(window, config=config)

        self.window = window
        self.channel = channel
        self.verified_can_link_account = False


    async def after_loaded(self):
        await self.channel.send(LOADED)


    async def before_sign_in(self, email):
        """ Ask the browser whether *email* may be linked to this profile;
            the browser may prompt the user. :class:`UserCanceledLogin` is
            raised if the answer is no. Any failure of the channel itself
            is logged and ignored: a browser that does not implement the
            command prompts for the relink warning after sign in instead.
        """

        try:
            response = await self.channel.request(CAN_LINK_ACCOUNT, {'email': email})
        except Exception as e:
            logger.error(f"before_sign_in failed with {e!r}")
            return

        if not _can_link(response):
            raise UserCanceledLogin()

        self.verified_can_link_account = True


    async def after_sign_in(self, account):
        await self._notify_relier_of_login(account)


    async def before_sign_up_confirmation_poll(self, account):

        # The browser is notified of an unverified login before the user has
        # verified their email, so that closing the original tab does not
        # prevent Sync from starting.

        await self._notify_relier_of_login(account)


    async def after_reset_password_confirmation_poll(self, account):
        await self._notify_relier_of_login(account)


    def teardown(self):
        self.channel.teardown()


    async def _notify_relier_of_login(self, account):
        await self.channel.send(LOGIN, self.login_data(account))


    def login_data(self, account):
        """ Select the fields of *account* (anything with a dict-like
            ``get``) that the browser is allowed to see.
        """

        login = dict()
        for field in ALLOWED_FIELDS:
            login[field] = account.get(field)

        login['verified'] = bool(login['verified'])
        login['verifiedCanLinkAccount'] = bool(self.verified_can_link_account)
        return login


# end of class SyncWebChannelBroker


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
