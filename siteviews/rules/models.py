from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str
    required_sections: list[str]


class CdnRules(BaseModel):
    static_base_url: str = Field(min_length=1)
    stickers_dir: str = "stickers"
    hero_dir: str = "hero"
    talks_dir: str = "talks"


class CharacterRules(BaseModel):
    characters_path: str = "/characters"
    sticker_max_height: str = "4.5rem"


class NoscriptNotice(BaseModel):
    speaker: str
    mood: str
    message: str


class HydrationRules(BaseModel):
    widget_base_path: str = Field(min_length=1)
    widget_extension: str = "js"
    cache_buster_param: str = "cacheBuster"
    noscript: NoscriptNotice


class PostRules(BaseModel):
    trusted_identity: str
    verified_badge_url: str
    verified_marker: str = ":verified:"
    timestamp_format: str
    missing_description: str = "no description provided"
    video_fallback_text: str
    permalink_text: str = "Link"


class AdRules(BaseModel):
    client_script_src: str
    publisher: str
    ad_type: str = "text"
    ad_style: str = "fixedfooter"
    speaker: str
    mood: str


class TalkRules(BaseModel):
    speaker: str
    mood: str
    hide_fluff_widget: str
    message: str


class SiteRules(BaseModel):
    project: ProjectRules
    cdn: CdnRules
    characters: CharacterRules
    hydration: HydrationRules
    posts: PostRules
    ads: AdRules
    talks: TalkRules
