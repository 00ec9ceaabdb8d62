from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm

from ballotbox import crud
from ballotbox.exceptions import BallotBoxError
from ballotbox.schemas import Token, UserCreate, UserOut
from ballotbox.security import CurrentUser, create_access_token, get_current_user, hash_password, verify_password

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post("/register", response_model=UserOut, status_code=201)
def register(user: UserCreate):
    try:
        uid = crud.create_user(user.email, hash_password(user.password))
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    if uid is None:
        raise HTTPException(status_code=400, detail="User already exists")
    return {"uid": uid, "email": user.email}


@auth_router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends()):
    try:
        user = crud.get_user_by_email(form_data.username)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if not user or not verify_password(form_data.password, user["hashed_password"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token({"sub": user["id"], "email": user["email"]})
    return {"access_token": token, "token_type": "bearer", "uid": user["id"]}


@auth_router.get("/me", response_model=UserOut)
def me(user: CurrentUser = Depends(get_current_user)):
    return {"uid": user.uid, "email": user.email}
