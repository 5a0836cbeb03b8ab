"""Bot -- connection context and request factory for every endpoint.

A :class:`Bot` holds the token, the API URL and the transport. It is never
mutated after construction, so one instance can be shared by any number of
concurrent requests. Each endpoint method returns an unsent request object::

    bot = Bot(token)
    message = await bot.send_venue(chat_id, 52.37, 4.89, "Dam", "Amsterdam").with_foursquare_id("4a")
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from telebind import methods
from telebind.codecs import InputFile
from telebind.network import RequestsTransport, Transport, fetch
from telebind.types import BotCommand, InputMedia

DEFAULT_API_URL = "https://api.telegram.org"

ChatIdLike = Union[int, str]

_logger = logging.getLogger("telebind.client")


class Bot:
    """Read-only connection context shared by all requests it creates."""

    _DEFAULT_TIMEOUT: int = 10

    __slots__ = ("_token", "_api_url", "_transport")

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        transport: Optional[Transport] = None,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        """Create a bot bound to *token*.

        Args:
            token: Bot token issued by @BotFather.
            api_url: Bot API server root, e.g. a local Bot API server.
            transport: HTTP transport; defaults to :class:`RequestsTransport`.
            timeout: Request timeout in seconds for the default transport.
        """
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._transport = transport if transport is not None else RequestsTransport(timeout)

    @property
    def token(self) -> str:
        return self._token

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def transport(self) -> Transport:
        return self._transport

    def __repr__(self) -> str:
        return f"Bot(api_url={self._api_url!r})"

    def method_url(self, method_name: str) -> str:
        return f"{self._api_url}/bot{self._token}/{method_name}"

    def file_url(self, file_path: str) -> str:
        return f"{self._api_url}/file/bot{self._token}/{file_path.lstrip('/')}"

    async def download_file(self, file_path: str) -> bytes:
        """Download raw bytes of a file resolved with :meth:`get_file`.

        Raises:
            NetworkError: On transport failure or a non-2xx status.
        """
        _logger.debug("Downloading file", extra={"file_path": file_path})
        return await fetch(self, self.file_url(file_path))

    # ------------------------------------------------------------------
    #  Updates and bot lifecycle
    # ------------------------------------------------------------------

    def get_updates(self) -> methods.GetUpdates:
        return methods.GetUpdates(self)

    def set_webhook(self, url: str) -> methods.SetWebhook:
        return methods.SetWebhook(self, url=url)

    def delete_webhook(self) -> methods.DeleteWebhook:
        return methods.DeleteWebhook(self)

    def get_webhook_info(self) -> methods.GetWebhookInfo:
        return methods.GetWebhookInfo(self)

    def get_me(self) -> methods.GetMe:
        return methods.GetMe(self)

    def log_out(self) -> methods.LogOut:
        return methods.LogOut(self)

    def close(self) -> methods.Close:
        return methods.Close(self)

    # ------------------------------------------------------------------
    #  Sending messages
    # ------------------------------------------------------------------

    def send_message(self, chat_id: ChatIdLike, text: str) -> methods.SendMessage:
        return methods.SendMessage(self, chat_id=chat_id, text=text)

    def forward_message(self, chat_id: ChatIdLike, from_chat_id: ChatIdLike, message_id: int) -> methods.ForwardMessage:
        return methods.ForwardMessage(self, chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id)

    def copy_message(self, chat_id: ChatIdLike, from_chat_id: ChatIdLike, message_id: int) -> methods.CopyMessage:
        return methods.CopyMessage(self, chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id)

    def send_photo(self, chat_id: ChatIdLike, photo: InputFile) -> methods.SendPhoto:
        return methods.SendPhoto(self, chat_id=chat_id, photo=photo)

    def send_audio(self, chat_id: ChatIdLike, audio: InputFile) -> methods.SendAudio:
        return methods.SendAudio(self, chat_id=chat_id, audio=audio)

    def send_document(self, chat_id: ChatIdLike, document: InputFile) -> methods.SendDocument:
        return methods.SendDocument(self, chat_id=chat_id, document=document)

    def send_video(self, chat_id: ChatIdLike, video: InputFile) -> methods.SendVideo:
        return methods.SendVideo(self, chat_id=chat_id, video=video)

    def send_animation(self, chat_id: ChatIdLike, animation: InputFile) -> methods.SendAnimation:
        return methods.SendAnimation(self, chat_id=chat_id, animation=animation)

    def send_voice(self, chat_id: ChatIdLike, voice: InputFile) -> methods.SendVoice:
        return methods.SendVoice(self, chat_id=chat_id, voice=voice)

    def send_video_note(self, chat_id: ChatIdLike, video_note: InputFile) -> methods.SendVideoNote:
        return methods.SendVideoNote(self, chat_id=chat_id, video_note=video_note)

    def send_media_group(self, chat_id: ChatIdLike, media: List[InputMedia]) -> methods.SendMediaGroup:
        return methods.SendMediaGroup(self, chat_id=chat_id, media=media)

    def send_location(self, chat_id: ChatIdLike, latitude: float, longitude: float) -> methods.SendLocation:
        return methods.SendLocation(self, chat_id=chat_id, latitude=latitude, longitude=longitude)

    def send_venue(
        self, chat_id: ChatIdLike, latitude: float, longitude: float, title: str, address: str
    ) -> methods.SendVenue:
        return methods.SendVenue(
            self, chat_id=chat_id, latitude=latitude, longitude=longitude, title=title, address=address
        )

    def send_contact(self, chat_id: ChatIdLike, phone_number: str, first_name: str) -> methods.SendContact:
        return methods.SendContact(self, chat_id=chat_id, phone_number=phone_number, first_name=first_name)

    def send_poll(self, chat_id: ChatIdLike, question: str, options: List[str]) -> methods.SendPoll:
        return methods.SendPoll(self, chat_id=chat_id, question=question, options=options)

    def send_dice(self, chat_id: ChatIdLike) -> methods.SendDice:
        return methods.SendDice(self, chat_id=chat_id)

    def send_chat_action(self, chat_id: ChatIdLike, action: str) -> methods.SendChatAction:
        return methods.SendChatAction(self, chat_id=chat_id, action=action)

    def send_sticker(self, chat_id: ChatIdLike, sticker: InputFile) -> methods.SendSticker:
        return methods.SendSticker(self, chat_id=chat_id, sticker=sticker)

    # ------------------------------------------------------------------
    #  Users, files and chats
    # ------------------------------------------------------------------

    def get_user_profile_photos(self, user_id: int) -> methods.GetUserProfilePhotos:
        return methods.GetUserProfilePhotos(self, user_id=user_id)

    def get_file(self, file_id: str) -> methods.GetFile:
        return methods.GetFile(self, file_id=file_id)

    def ban_chat_member(self, chat_id: ChatIdLike, user_id: int) -> methods.BanChatMember:
        return methods.BanChatMember(self, chat_id=chat_id, user_id=user_id)

    def unban_chat_member(self, chat_id: ChatIdLike, user_id: int) -> methods.UnbanChatMember:
        return methods.UnbanChatMember(self, chat_id=chat_id, user_id=user_id)

    def set_chat_photo(self, chat_id: ChatIdLike, photo: InputFile) -> methods.SetChatPhoto:
        return methods.SetChatPhoto(self, chat_id=chat_id, photo=photo)

    def delete_chat_photo(self, chat_id: ChatIdLike) -> methods.DeleteChatPhoto:
        return methods.DeleteChatPhoto(self, chat_id=chat_id)

    def set_chat_title(self, chat_id: ChatIdLike, title: str) -> methods.SetChatTitle:
        return methods.SetChatTitle(self, chat_id=chat_id, title=title)

    def set_chat_description(self, chat_id: ChatIdLike) -> methods.SetChatDescription:
        return methods.SetChatDescription(self, chat_id=chat_id)

    def pin_chat_message(self, chat_id: ChatIdLike, message_id: int) -> methods.PinChatMessage:
        return methods.PinChatMessage(self, chat_id=chat_id, message_id=message_id)

    def unpin_chat_message(self, chat_id: ChatIdLike) -> methods.UnpinChatMessage:
        return methods.UnpinChatMessage(self, chat_id=chat_id)

    def leave_chat(self, chat_id: ChatIdLike) -> methods.LeaveChat:
        return methods.LeaveChat(self, chat_id=chat_id)

    def get_chat(self, chat_id: ChatIdLike) -> methods.GetChat:
        return methods.GetChat(self, chat_id=chat_id)

    def get_chat_administrators(self, chat_id: ChatIdLike) -> methods.GetChatAdministrators:
        return methods.GetChatAdministrators(self, chat_id=chat_id)

    def get_chat_member(self, chat_id: ChatIdLike, user_id: int) -> methods.GetChatMember:
        return methods.GetChatMember(self, chat_id=chat_id, user_id=user_id)

    def create_forum_topic(self, chat_id: ChatIdLike, name: str) -> methods.CreateForumTopic:
        return methods.CreateForumTopic(self, chat_id=chat_id, name=name)

    def edit_forum_topic(self, chat_id: ChatIdLike, message_thread_id: int) -> methods.EditForumTopic:
        return methods.EditForumTopic(self, chat_id=chat_id, message_thread_id=message_thread_id)

    # ------------------------------------------------------------------
    #  Callbacks and commands
    # ------------------------------------------------------------------

    def answer_callback_query(self, callback_query_id: str) -> methods.AnswerCallbackQuery:
        return methods.AnswerCallbackQuery(self, callback_query_id=callback_query_id)

    def set_my_commands(self, commands: List[BotCommand]) -> methods.SetMyCommands:
        return methods.SetMyCommands(self, commands=commands)

    def get_my_commands(self) -> methods.GetMyCommands:
        return methods.GetMyCommands(self)

    # ------------------------------------------------------------------
    #  Updating messages
    # ------------------------------------------------------------------

    def edit_message_text(self, chat_id: ChatIdLike, message_id: int, text: str) -> methods.EditMessageText:
        return methods.EditMessageText(self, chat_id=chat_id, message_id=message_id, text=text)

    def edit_message_text_inline(self, inline_message_id: str, text: str) -> methods.EditMessageText:
        return methods.EditMessageText(self, inline_message_id=inline_message_id, text=text)

    def edit_message_caption(self, chat_id: ChatIdLike, message_id: int) -> methods.EditMessageCaption:
        return methods.EditMessageCaption(self, chat_id=chat_id, message_id=message_id)

    def edit_message_media(self, chat_id: ChatIdLike, message_id: int, media: InputMedia) -> methods.EditMessageMedia:
        return methods.EditMessageMedia(self, chat_id=chat_id, message_id=message_id, media=media)

    def edit_message_reply_markup(self, chat_id: ChatIdLike, message_id: int) -> methods.EditMessageReplyMarkup:
        return methods.EditMessageReplyMarkup(self, chat_id=chat_id, message_id=message_id)

    def delete_message(self, chat_id: ChatIdLike, message_id: int) -> methods.DeleteMessage:
        return methods.DeleteMessage(self, chat_id=chat_id, message_id=message_id)


# ── Module-level default bot ─────────────────────────────────────────────────
#
# A lazily-initialised Bot carrying the BOT_TOKEN / API_URL / REQUEST_TIMEOUT
# values from :mod:`config`.
# ─────────────────────────────────────────────────────────────────────────────

_default_bot: Bot | None = None


def default_bot() -> Bot:
    """Return (and lazily create) the module-level bot built from :mod:`config`.

    Raises:
        RuntimeError: If ``BOT_TOKEN`` is not configured.
    """
    global _default_bot
    if _default_bot is None:
        from config import API_URL, BOT_TOKEN, REQUEST_TIMEOUT  # deferred so importing telebind never reads .env

        if not BOT_TOKEN:
            raise RuntimeError("BOT_TOKEN is not set")
        _default_bot = Bot(BOT_TOKEN, api_url=API_URL, timeout=REQUEST_TIMEOUT)
    return _default_bot
