"""Request payloads accepted by the admin API and the inquiry form."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


def _blank_to_none(v):
    return None if v == "" else v


def _check_images(images):
    if images is not None and not any(img.url for img in images):
        raise ValueError("at least one image with a URL is required")
    return images


class CategoryCreate(_Payload):
    name: str = Field(min_length=1)
    slug: Optional[str] = None


class CategoryUpdate(_Payload):
    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    order: Optional[int] = None

    @field_validator("slug")
    @classmethod
    def lower_slug(cls, v):
        return v.lower() if v is not None else v


class ImagePayload(_Payload):
    url: str = ""
    alt_pl: Optional[str] = Field(default=None, alias="altPl")
    alt_en: Optional[str] = Field(default=None, alias="altEn")
    is_primary: bool = Field(default=False, alias="isPrimary")
    order: Optional[int] = None


class ItemCreate(_Payload):
    category_id: int = Field(alias="categoryId")
    title: str = Field(min_length=1)
    title_en: Optional[str] = Field(default=None, alias="titleEn")
    description: str = ""
    description_en: Optional[str] = Field(default=None, alias="descriptionEn")
    size_min: float = Field(alias="rozmiarMin")
    size_max: float = Field(alias="rozmiarMax")
    main_size: Optional[float] = Field(default=None, alias="rozmiarGlowny")
    buckle_size: Optional[float] = Field(default=None, alias="rozSprz")
    price_pln: float = Field(alias="cenaPLN")
    belt_number: int = Field(alias="numerPaska")
    images: List[ImagePayload] = Field(min_length=1)

    @field_validator("images")
    @classmethod
    def images_have_url(cls, v):
        return _check_images(v)

    @field_validator("main_size", "buckle_size", mode="before")
    @classmethod
    def optional_sizes(cls, v):
        return _blank_to_none(v)


class ItemUpdate(_Payload):
    category_id: Optional[int] = Field(default=None, alias="categoryId")
    title: Optional[str] = Field(default=None, min_length=1)
    title_en: Optional[str] = Field(default=None, alias="titleEn")
    description: Optional[str] = None
    description_en: Optional[str] = Field(default=None, alias="descriptionEn")
    size_min: Optional[float] = Field(default=None, alias="rozmiarMin")
    size_max: Optional[float] = Field(default=None, alias="rozmiarMax")
    main_size: Optional[float] = Field(default=None, alias="rozmiarGlowny")
    buckle_size: Optional[float] = Field(default=None, alias="rozSprz")
    price_pln: Optional[float] = Field(default=None, alias="cenaPLN")
    belt_number: Optional[int] = Field(default=None, alias="numerPaska")
    images: Optional[List[ImagePayload]] = None

    @field_validator("images")
    @classmethod
    def images_have_url(cls, v):
        return _check_images(v)

    @field_validator("main_size", "buckle_size", mode="before")
    @classmethod
    def optional_sizes(cls, v):
        return _blank_to_none(v)


class WoodCreate(_Payload):
    description_pl: str = Field(min_length=1, alias="descriptionPl")
    description_en: Optional[str] = Field(default=None, alias="descriptionEn")
    price_pln: float = Field(gt=0, alias="pricePLN")
    image: str = Field(min_length=1)
    order: int = 0


class WoodUpdate(_Payload):
    description_pl: Optional[str] = Field(default=None, alias="descriptionPl")
    description_en: Optional[str] = Field(default=None, alias="descriptionEn")
    price_pln: Optional[float] = Field(default=None, alias="pricePLN")
    image: Optional[str] = None
    order: Optional[int] = None


class InquiryPayload(_Payload):
    email: EmailStr
    product_no: str = Field(min_length=1, max_length=6, alias="productNo")

    @field_validator("product_no", mode="before")
    @classmethod
    def number_to_text(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
