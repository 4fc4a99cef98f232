"""Data models exchanged with the rendering host."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """Model representing a position in 2D space."""

    x: float
    y: float


class Viewport(BaseModel):
    """Viewport metrics supplied on load and on every resize."""

    width: float = Field(..., ge=0, description="Viewport width in pixels")
    height: float = Field(..., ge=0, description="Viewport height in pixels")
    anchor: Position = Field(..., description="Stage center in viewport pixels, scatter offsets are relative to it")

    @classmethod
    def centered(cls, width: float, height: float) -> "Viewport":
        """Build a viewport whose stage is centered in the window."""
        return cls(width=width, height=height, anchor=Position(x=width / 2, y=height / 2))


class ScatterEntry(BaseModel):
    """Random on-screen offset and tilt of an unplaced piece."""

    position: Position
    tilt: float = Field(..., description="Rotation in degrees")


class MoveAttempt(BaseModel):
    """A user drop of a piece onto a candidate slot."""

    piece_id: str
    target_slot: int


class Piece(BaseModel):
    """A puzzle piece with a fixed home slot."""

    model_config = ConfigDict(frozen=True)

    id: str
    home_slot: int = Field(..., ge=0)
    label: str


class TexturePattern(BaseModel):
    """Placement of the source image tile in a piece's local coordinates."""

    id: Optional[str] = None
    x: float
    y: float
    width: float
    height: float


class MaskBounds(BaseModel):
    """Rectangle filled with the texture before the outline clip is applied."""

    x: float
    y: float
    width: float
    height: float


class PieceView(BaseModel):
    """Everything the host needs to draw one piece."""

    id: str
    label: str
    home_slot: int
    placed: bool
    outline: str = Field(..., description="SVG path data, used for both the silhouette and the clip path")
    view_box: str
    svg_scale: float
    texture: TexturePattern
    mask: MaskBounds
    scatter: Optional[ScatterEntry] = Field(None, description="Set while the piece is unplaced")
    slot: Optional[int] = Field(None, description="Set once the piece is placed")
