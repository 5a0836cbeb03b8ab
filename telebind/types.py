"""Pydantic models for the Telegram Bot API objects used by the endpoints.

Models that are decoded from responses ignore unknown keys, so newer API
versions adding fields do not break decoding. Models that are sent (input
media, keyboards, commands) are encoded by :mod:`telebind.form`, which
drops unset optional fields and honours field aliases.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from telebind.codecs import InputFile, Rgb

#: Output type of endpoints that answer with a bare ``true``.
TrueResult = Literal[True]


class ResponseParameters(BaseModel):
    """Contains information about why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None

    model_config = {"populate_by_name": True}


class User(BaseModel):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ChatPhoto(BaseModel):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str

    model_config = {"populate_by_name": True}


class ChatPermissions(BaseModel):
    """Describes actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None

    model_config = {"populate_by_name": True}


class Chat(BaseModel):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: Optional[bool] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    linked_chat_id: Optional[int] = None

    model_config = {"populate_by_name": True}


class MessageEntity(BaseModel):
    """One special entity in a text message: hashtag, username, URL, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None
    custom_emoji_id: Optional[str] = None

    model_config = {"populate_by_name": True}


class PhotoSize(BaseModel):
    """One size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Animation(BaseModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Audio(BaseModel):
    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumbnail: Optional[PhotoSize] = None

    model_config = {"populate_by_name": True}


class Document(BaseModel):
    file_id: str
    file_unique_id: str
    thumbnail: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Video(BaseModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class VideoNote(BaseModel):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumbnail: Optional[PhotoSize] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Voice(BaseModel):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Sticker(BaseModel):
    file_id: str
    file_unique_id: str
    type: str = "regular"
    width: int
    height: int
    is_animated: bool
    is_video: bool = False
    thumbnail: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Contact(BaseModel):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None

    model_config = {"populate_by_name": True}


class Dice(BaseModel):
    """An animated emoji that displays a random value."""

    emoji: str
    value: int

    model_config = {"populate_by_name": True}


class PollOption(BaseModel):
    text: str
    voter_count: int

    model_config = {"populate_by_name": True}


class Poll(BaseModel):
    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None

    model_config = {"populate_by_name": True}


class Location(BaseModel):
    """This object represents a point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None

    model_config = {"populate_by_name": True}


class Venue(BaseModel):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None

    model_config = {"populate_by_name": True}


class ForumTopicCreated(BaseModel):
    name: str
    icon_color: Rgb
    icon_custom_emoji_id: Optional[str] = None

    model_config = {"populate_by_name": True}


class Message(BaseModel):
    """This object represents a message."""

    message_id: int
    date: int
    chat: Chat
    message_thread_id: Optional[int] = None
    from_field: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    forum_topic_created: Optional[ForumTopicCreated] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    model_config = {"populate_by_name": True}


class MessageId(BaseModel):
    """A unique message identifier, returned by ``copyMessage``."""

    message_id: int

    model_config = {"populate_by_name": True}


class UserProfilePhotos(BaseModel):
    total_count: int
    photos: List[List[PhotoSize]]

    model_config = {"populate_by_name": True}


class File(BaseModel):
    """A file ready to be downloaded via :meth:`telebind.client.Bot.download_file`."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None

    model_config = {"populate_by_name": True}


class ChatMember(BaseModel):
    """Information about one member of a chat."""

    user: User
    status: str
    custom_title: Optional[str] = None
    is_anonymous: Optional[bool] = None
    can_be_edited: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None
    is_member: Optional[bool] = None
    until_date: Optional[int] = None

    model_config = {"populate_by_name": True}


class ForumTopic(BaseModel):
    """A forum topic. ``icon_color`` travels as a packed ``0xRRGGBB`` integer."""

    message_thread_id: int
    name: str
    icon_color: Rgb
    icon_custom_emoji_id: Optional[str] = None

    model_config = {"populate_by_name": True}


class BotCommand(BaseModel):
    command: str
    description: str

    model_config = {"populate_by_name": True}


class CallbackQuery(BaseModel):
    id: str
    from_field: User = Field(..., alias="from")
    chat_instance: str
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None

    model_config = {"populate_by_name": True}


class Update(BaseModel):
    """An incoming update. At most one of the optional fields is present."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    callback_query: Optional[CallbackQuery] = None
    poll: Optional[Poll] = None

    model_config = {"populate_by_name": True}


class WebhookInfo(BaseModel):
    """Current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None

    model_config = {"populate_by_name": True}


# ── Reply markup ─────────────────────────────────────────────────────────────


class InlineKeyboardButton(BaseModel):
    """One button of an inline keyboard. Exactly one optional field must be used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    pay: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InlineKeyboardMarkup(BaseModel):
    inline_keyboard: List[List[InlineKeyboardButton]]

    model_config = {"populate_by_name": True}


class KeyboardButton(BaseModel):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ReplyKeyboardMarkup(BaseModel):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    is_persistent: Optional[bool] = None
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ReplyKeyboardRemove(BaseModel):
    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ForceReply(BaseModel):
    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


# ── Input media ──────────────────────────────────────────────────────────────


class InputMediaPhoto(BaseModel):
    """A photo to be sent as part of a media group or an edited message."""

    type: Literal["photo"] = "photo"
    media: InputFile
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    has_spoiler: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InputMediaVideo(BaseModel):
    type: Literal["video"] = "video"
    media: InputFile
    thumbnail: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None
    has_spoiler: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InputMediaAnimation(BaseModel):
    type: Literal["animation"] = "animation"
    media: InputFile
    thumbnail: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    has_spoiler: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InputMediaAudio(BaseModel):
    type: Literal["audio"] = "audio"
    media: InputFile
    thumbnail: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None

    model_config = {"populate_by_name": True}


class InputMediaDocument(BaseModel):
    type: Literal["document"] = "document"
    media: InputFile
    thumbnail: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None

    model_config = {"populate_by_name": True}


InputMedia = Union[InputMediaPhoto, InputMediaVideo, InputMediaAnimation, InputMediaAudio, InputMediaDocument]


for _model in (Chat, Message, CallbackQuery, Update):
    _model.model_rebuild()
