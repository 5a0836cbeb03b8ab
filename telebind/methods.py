"""Endpoint requests, one class per Bot API method.

Each class only declares its parameters; encoding, dispatch and decoding
live in :class:`telebind.request.Request`. Required parameters come first,
optional ones default to ``None`` and are omitted from the wire when unset.
"""

from __future__ import annotations

from typing import ClassVar, List, Optional, Union

from pydantic import Field

from telebind.codecs import ChatId, InputFile, Rgb
from telebind.request import EXPLICIT_NULL, Request
from telebind.types import (
    BotCommand,
    Chat,
    ChatMember,
    File,
    ForumTopic,
    InlineKeyboardMarkup,
    InputMedia,
    Message,
    MessageEntity,
    MessageId,
    ReplyMarkup,
    TrueResult,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)


# ── Updates and bot lifecycle ────────────────────────────────────────────────


class GetUpdates(Request[List[Update]]):
    """Receive incoming updates using long polling."""

    method_name: ClassVar[str] = "getUpdates"

    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[str]] = None

    @property
    def long_poll(self) -> float:
        return self.timeout or 0


class SetWebhook(Request[TrueResult]):
    """Specify a URL to receive incoming updates via an outgoing webhook."""

    method_name: ClassVar[str] = "setWebhook"

    url: str
    certificate: Optional[InputFile] = None
    ip_address: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
    drop_pending_updates: Optional[bool] = None
    secret_token: Optional[str] = None


class DeleteWebhook(Request[TrueResult]):
    method_name: ClassVar[str] = "deleteWebhook"

    drop_pending_updates: Optional[bool] = None


class GetWebhookInfo(Request[WebhookInfo]):
    method_name: ClassVar[str] = "getWebhookInfo"


class GetMe(Request[User]):
    """A simple method for testing your bot's auth token."""

    method_name: ClassVar[str] = "getMe"


class LogOut(Request[TrueResult]):
    method_name: ClassVar[str] = "logOut"


class Close(Request[TrueResult]):
    method_name: ClassVar[str] = "close"


# ── Sending messages ─────────────────────────────────────────────────────────


class SendMessage(Request[Message]):
    """Send a text message."""

    method_name: ClassVar[str] = "sendMessage"

    chat_id: ChatId
    text: str
    message_thread_id: Optional[int] = None
    parse_mode: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class ForwardMessage(Request[Message]):
    """Forward a message of any kind."""

    method_name: ClassVar[str] = "forwardMessage"

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    message_thread_id: Optional[int] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None


class CopyMessage(Request[MessageId]):
    """Copy a message without a link to the original."""

    method_name: ClassVar[str] = "copyMessage"

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    message_thread_id: Optional[int] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPhoto(Request[Message]):
    method_name: ClassVar[str] = "sendPhoto"

    chat_id: ChatId
    photo: InputFile
    message_thread_id: Optional[int] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    has_spoiler: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendAudio(Request[Message]):
    """Send an audio file to be displayed in the music player."""

    method_name: ClassVar[str] = "sendAudio"

    chat_id: ChatId
    audio: InputFile
    message_thread_id: Optional[int] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    thumbnail: Optional[InputFile] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDocument(Request[Message]):
    method_name: ClassVar[str] = "sendDocument"

    chat_id: ChatId
    document: InputFile
    message_thread_id: Optional[int] = None
    thumbnail: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideo(Request[Message]):
    method_name: ClassVar[str] = "sendVideo"

    chat_id: ChatId
    video: InputFile
    message_thread_id: Optional[int] = None
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumbnail: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    has_spoiler: Optional[bool] = None
    supports_streaming: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendAnimation(Request[Message]):
    """Send an animation (GIF or H.264/MPEG-4 AVC video without sound)."""

    method_name: ClassVar[str] = "sendAnimation"

    chat_id: ChatId
    animation: InputFile
    message_thread_id: Optional[int] = None
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumbnail: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    has_spoiler: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVoice(Request[Message]):
    method_name: ClassVar[str] = "sendVoice"

    chat_id: ChatId
    voice: InputFile
    message_thread_id: Optional[int] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideoNote(Request[Message]):
    method_name: ClassVar[str] = "sendVideoNote"

    chat_id: ChatId
    video_note: InputFile
    message_thread_id: Optional[int] = None
    duration: Optional[int] = None
    length: Optional[int] = None
    thumbnail: Optional[InputFile] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendMediaGroup(Request[List[Message]]):
    """Send a group of photos, videos, documents or audios as an album.

    Items holding inline files are uploaded as ``attach://`` parts, so one
    inline item switches the whole request to multipart.
    """

    method_name: ClassVar[str] = "sendMediaGroup"

    chat_id: ChatId
    media: List[InputMedia]
    message_thread_id: Optional[int] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None


class SendLocation(Request[Message]):
    method_name: ClassVar[str] = "sendLocation"

    chat_id: ChatId
    latitude: float
    longitude: float
    message_thread_id: Optional[int] = None
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVenue(Request[Message]):
    """Send information about a venue."""

    method_name: ClassVar[str] = "sendVenue"

    chat_id: ChatId
    latitude: float
    longitude: float
    title: str
    address: str
    message_thread_id: Optional[int] = None
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendContact(Request[Message]):
    method_name: ClassVar[str] = "sendContact"

    chat_id: ChatId
    phone_number: str
    first_name: str
    message_thread_id: Optional[int] = None
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPoll(Request[Message]):
    method_name: ClassVar[str] = "sendPoll"

    chat_id: ChatId
    question: str
    options: List[str]
    message_thread_id: Optional[int] = None
    is_anonymous: Optional[bool] = None
    type: Optional[str] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_parse_mode: Optional[str] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDice(Request[Message]):
    """Send an animated emoji that will display a random value."""

    method_name: ClassVar[str] = "sendDice"

    chat_id: ChatId
    message_thread_id: Optional[int] = None
    emoji: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendChatAction(Request[TrueResult]):
    """Tell the user that something is happening on the bot's side."""

    method_name: ClassVar[str] = "sendChatAction"

    chat_id: ChatId
    action: str
    message_thread_id: Optional[int] = None


class SendSticker(Request[Message]):
    method_name: ClassVar[str] = "sendSticker"

    chat_id: ChatId
    sticker: InputFile
    message_thread_id: Optional[int] = None
    emoji: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


# ── Users, files and chats ───────────────────────────────────────────────────


class GetUserProfilePhotos(Request[UserProfilePhotos]):
    method_name: ClassVar[str] = "getUserProfilePhotos"

    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = None


class GetFile(Request[File]):
    """Get basic info about a file and prepare it for downloading."""

    method_name: ClassVar[str] = "getFile"

    file_id: str


class BanChatMember(Request[TrueResult]):
    method_name: ClassVar[str] = "banChatMember"

    chat_id: ChatId
    user_id: int
    until_date: Optional[int] = None
    revoke_messages: Optional[bool] = None


class UnbanChatMember(Request[TrueResult]):
    method_name: ClassVar[str] = "unbanChatMember"

    chat_id: ChatId
    user_id: int
    only_if_banned: Optional[bool] = None


class SetChatPhoto(Request[TrueResult]):
    """Set a new profile photo for the chat. The photo is always uploaded."""

    method_name: ClassVar[str] = "setChatPhoto"

    chat_id: ChatId
    photo: InputFile


class DeleteChatPhoto(Request[TrueResult]):
    """Delete a chat photo. Photos can't be changed for private chats."""

    method_name: ClassVar[str] = "deleteChatPhoto"

    chat_id: ChatId


class SetChatTitle(Request[TrueResult]):
    method_name: ClassVar[str] = "setChatTitle"

    chat_id: ChatId
    title: str


class SetChatDescription(Request[TrueResult]):
    method_name: ClassVar[str] = "setChatDescription"

    chat_id: ChatId
    description: Optional[str] = None


class PinChatMessage(Request[TrueResult]):
    method_name: ClassVar[str] = "pinChatMessage"

    chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None


class UnpinChatMessage(Request[TrueResult]):
    method_name: ClassVar[str] = "unpinChatMessage"

    chat_id: ChatId
    message_id: Optional[int] = None


class LeaveChat(Request[TrueResult]):
    method_name: ClassVar[str] = "leaveChat"

    chat_id: ChatId


class GetChat(Request[Chat]):
    method_name: ClassVar[str] = "getChat"

    chat_id: ChatId


class GetChatAdministrators(Request[List[ChatMember]]):
    method_name: ClassVar[str] = "getChatAdministrators"

    chat_id: ChatId


class GetChatMember(Request[ChatMember]):
    method_name: ClassVar[str] = "getChatMember"

    chat_id: ChatId
    user_id: int


class CreateForumTopic(Request[ForumTopic]):
    """Create a topic in a forum supergroup chat."""

    method_name: ClassVar[str] = "createForumTopic"

    chat_id: ChatId
    name: str
    icon_color: Optional[Rgb] = None
    icon_custom_emoji_id: Optional[str] = None


class EditForumTopic(Request[TrueResult]):
    """Edit name and icon of a topic.

    Setting ``icon_custom_emoji_id`` to ``""`` removes the icon; leaving it
    unset keeps the current one.
    """

    method_name: ClassVar[str] = "editForumTopic"

    chat_id: ChatId
    message_thread_id: int
    name: Optional[str] = None
    icon_custom_emoji_id: Optional[str] = None


# ── Callbacks and commands ───────────────────────────────────────────────────


class AnswerCallbackQuery(Request[TrueResult]):
    method_name: ClassVar[str] = "answerCallbackQuery"

    callback_query_id: str
    text: Optional[str] = None
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = None


class SetMyCommands(Request[TrueResult]):
    method_name: ClassVar[str] = "setMyCommands"

    commands: List[BotCommand]
    language_code: Optional[str] = None


class GetMyCommands(Request[List[BotCommand]]):
    method_name: ClassVar[str] = "getMyCommands"

    language_code: Optional[str] = None


# ── Updating messages ────────────────────────────────────────────────────────
#
# The edit methods return the edited Message for chat messages and ``true``
# for inline messages, hence the union output types.


class EditMessageText(Request[Union[Message, TrueResult]]):
    method_name: ClassVar[str] = "editMessageText"

    text: str
    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    parse_mode: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaption(Request[Union[Message, TrueResult]]):
    """Edit captions of messages.

    Setting ``caption`` to ``None`` explicitly removes the caption.
    """

    method_name: ClassVar[str] = "editMessageCaption"

    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    caption: Optional[str] = Field(None, json_schema_extra=EXPLICIT_NULL)
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageMedia(Request[Union[Message, TrueResult]]):
    method_name: ClassVar[str] = "editMessageMedia"

    media: InputMedia
    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkup(Request[Union[Message, TrueResult]]):
    method_name: ClassVar[str] = "editMessageReplyMarkup"

    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessage(Request[TrueResult]):
    method_name: ClassVar[str] = "deleteMessage"

    chat_id: ChatId
    message_id: int
