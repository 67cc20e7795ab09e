"""Main application module."""
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

import crud
import models
from auth import token_extractor
from database import engine, get_db
from errors import BlogError, InvalidInput, NotFound, Unauthorized
from logger import get_logger, setup_logging
from permissions import authorize_create, authorize_delete, authorize_like
from schemas import LoginRequest, LoginResponse, PostCreate, PostLikes, PostOut, UserCreate, UserOut
from security import Identity
from services import login_user, register_user

setup_logging()
log = get_logger(__name__)

app = FastAPI(title="Bloglist API")
models.Base.metadata.create_all(bind=engine)


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError):
    """Render domain errors as ``{"error": message}`` with their status"""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and ids are client errors, reported as 400"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "malformed request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content={"error": "internal server error"})


@app.post("/api/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Authenticate a user using username and password"""
    return login_user(db, credentials.username, credentials.password)


@app.post("/api/users", response_model=UserOut)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new user"""
    return register_user(db, username=user.username, password=user.password, name=user.name)


@app.get("/api/users", response_model=list[UserOut])
def get_all_users(db: Session = Depends(get_db)):
    """Retrieve all users with the posts they own"""
    return crud.list_users(db)


blogs_router = APIRouter(prefix="/api/blogs", dependencies=[Depends(token_extractor)])


def get_existing_post(db: Session, post_id: int) -> models.Post:
    post = crud.get_post_by_id(db, post_id)
    if post is None:
        raise NotFound("Post not found")
    return post


@blogs_router.get("", response_model=list[PostOut])
def get_all_posts(db: Session = Depends(get_db)):
    """Retrieve all posts with their owners"""
    return crud.list_posts(db)


@blogs_router.get("/{post_id}", response_model=PostOut)
def read_post(post_id: int, db: Session = Depends(get_db)):
    """Retrieve a single post by its ID"""
    return get_existing_post(db, post_id)


@blogs_router.post("", response_model=PostOut)
def create_post(post: PostCreate,
                db: Session = Depends(get_db),
                identity: Optional[Identity] = Depends(token_extractor)):
    """Create a new post owned by the authenticated user"""
    identity = authorize_create(identity)

    if post.title is None and post.url is None:
        raise InvalidInput("title or url missing")

    owner = crud.get_user_by_id(db, identity.user_id)
    if owner is None:
        raise Unauthorized("user not found")

    likes = post.likes if post.likes is not None else 0
    db_post = crud.create_post(db, owner, title=post.title, author=post.author, url=post.url, likes=likes)
    log.info("User %s created post %s", owner.id, db_post.id)
    return db_post


@blogs_router.put("/{post_id}", response_model=PostOut)
def like_post(post_id: int,
              update: PostLikes,
              db: Session = Depends(get_db),
              identity: Optional[Identity] = Depends(token_extractor)):
    """Update the like counter of a post. Any authenticated user may do this"""
    identity = authorize_like(identity)
    db_post = get_existing_post(db, post_id)
    db_post = crud.update_post_likes(db, db_post, update.likes)
    log.info("User %s set likes of post %s to %s", identity.user_id, db_post.id, db_post.likes)
    return db_post


@blogs_router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int,
                db: Session = Depends(get_db),
                identity: Optional[Identity] = Depends(token_extractor)):
    """Delete a post by ID. Only the owner can delete the post"""
    db_post = get_existing_post(db, post_id)
    identity = authorize_delete(db_post, identity)
    crud.delete_post(db, db_post)
    log.info("User %s deleted post %s", identity.user_id, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


app.include_router(blogs_router)
